"""Styled, accessible UI components that build an HTML node tree with Tailwind-style classes."""

__version__ = "0.1.0"