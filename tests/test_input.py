import pytest

from lumen_blocks.core import Node, reset_ids
from lumen_blocks.input import InputSize, InputVariant, input_classes, text_input


@pytest.fixture(autouse=True)
def _fresh_ids():
    reset_ids()


def _field(node):
    return node.find(lambda n: n.tag == "input")


def test_default_classes():
    classes = input_classes()
    assert "border-input focus:border-ring" in classes
    assert "text-sm px-3 py-1.5 h-10" in classes
    assert "w-auto" in classes.split()
    assert classes.endswith("bg-background")


def test_error_large_disabled_classes():
    classes = input_classes(InputVariant.ERROR, InputSize.LARGE, full_width=True, disabled=True)
    assert "border-destructive focus:border-destructive" in classes
    assert "text-base px-4 py-2 h-12" in classes
    assert "w-full" in classes.split()
    assert "opacity-50 cursor-not-allowed bg-muted" in classes


@pytest.mark.parametrize(
    "size,left,right",
    [(InputSize.SMALL, "pl-7", "pr-7"), (InputSize.MEDIUM, "pl-9", "pr-9"), (InputSize.LARGE, "pl-10", "pr-10")],
)
def test_icon_padding(size, left, right):
    classes = input_classes(size=size, has_icon_left=True, has_icon_right=True).split()
    assert left in classes
    assert right in classes
    assert left not in input_classes(size=size).split()


def test_user_class_comes_last():
    assert input_classes(class_="mine").split()[-1] == "mine"


def test_structure_without_icons():
    node = text_input(placeholder="Name", value="Ada")
    assert node.tag == "div"
    assert node.attrs["class"] == "relative"
    assert len(node.children) == 1
    field = _field(node)
    assert field.attrs["type"] == "text"
    assert field.attrs["placeholder"] == "Name"
    assert field.attrs["value"] == "Ada"
    assert field.attrs["id"].startswith("dxc-")


def test_structure_with_icons():
    left = Node("svg", {"data-icon": "l"})
    right = Node("svg", {"data-icon": "r"})
    node = text_input(icon_left=left, icon_right=right)
    assert [c.tag for c in node.children] == ["div", "input", "div"]
    assert node.children[0].children == [left]
    assert node.children[2].children == [right]
    assert "pl-9" in node.children[1].attrs["class"].split()


def test_handlers_forward_events():
    seen = []
    node = text_input(
        on_change=lambda e: seen.append(("change", e)),
        on_focus=lambda e: seen.append(("focus", e)),
        on_blur=lambda e: seen.append(("blur", e)),
    )
    field = _field(node)
    field.trigger("change", 1)
    field.trigger("focus", 2)
    field.trigger("blur", 3)
    assert seen == [("change", 1), ("focus", 2), ("blur", 3)]


def test_handlers_without_callbacks():
    assert _field(text_input()).trigger("change", "x") is None


def test_aria_flags_and_user_id():
    field = _field(text_input(required=True, id="email", attributes={"autocomplete": "off"}))
    assert field.attrs["aria-required"] == "true"
    assert field.attrs["aria-disabled"] == "false"
    assert field.attrs["required"] is True
    assert field.attrs["id"] == "email"
    assert field.attrs["autocomplete"] == "off"