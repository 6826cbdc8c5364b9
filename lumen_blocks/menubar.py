"""Styled horizontal menu bar with menus, triggers, content panels and items."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .core import Node, prepend_classes


def menubar(*args: Any, class_: Optional[str] = None) -> Node:
    """Build the menu bar container."""
    defaults = "flex items-center gap-1 px-1 py-1 border border-border bg-background rounded-md shadow-sm"
    return Node("div", {"class": prepend_classes(class_, defaults), "role": "menubar"}, list(args))


def menubar_menu(*args: Any, index: int, class_: Optional[str] = None) -> Node:
    """Build one menu of the bar at position ``index``."""
    defaults = "relative group flex flex-col items-stretch"
    return Node("div", {"class": prepend_classes(class_, defaults), "data-index": str(index)}, list(args))


def menubar_trigger(*args: Any, class_: Optional[str] = None) -> Node:
    """Build the button that opens a menu."""
    defaults = (
        "px-3 py-1.5 rounded-sm text-sm font-medium text-foreground hover:bg-muted "
        "focus:outline-none focus:ring-2 focus:ring-ring transition-colors"
    )
    return Node("button", {"class": prepend_classes(class_, defaults), "type": "button"}, list(args))


def menubar_content(*args: Any, class_: Optional[str] = None) -> Node:
    """Build the panel that drops down under an open menu."""
    defaults = (
        "hidden group-data-[state=open]:block absolute left-0 top-full mt-2 min-w-[10rem] "
        "bg-popover border border-border rounded-md shadow-lg z-50 p-1"
    )
    return Node("div", {"class": prepend_classes(class_, defaults), "role": "menu"}, list(args))


def menubar_item(
    *args: Any,
    value: str,
    on_select: Optional[Callable[[str], Any]] = None,
    class_: Optional[str] = None,
) -> Node:
    """Build a menu item; selecting it passes ``value`` to ``on_select``."""
    defaults = (
        "menubar-item cursor-pointer select-none px-3 py-1.5 rounded-sm text-sm text-foreground "
        "hover:bg-accent focus:bg-accent focus:outline-none transition-colors"
    )

    def handle_select(_event: Any = None) -> Any:
        return on_select(value) if on_select is not None else None

    attrs: dict[str, Any] = {
        "class": prepend_classes(class_, defaults),
        "role": "menuitem",
        "data-value": value,
    }
    return Node("div", attrs, list(args), {"select": handle_select})