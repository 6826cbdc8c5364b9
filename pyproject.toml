[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumen_blocks"
version = "0.1.0"
description = "Accessible, styled UI components that build an HTML node tree with Tailwind-style classes"
requires-python = ">=3.10"
dependencies = []
keywords = ["components", "ui", "tailwind", "html", "accessibility"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lumen_blocks"]

[tool.pytest.ini_options]
addopts = "-ra"
