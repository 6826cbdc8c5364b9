"""Styled context menu with items, checkbox items, radio groups, labels and separators."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from .core import Node, Signal, id_or, join_classes, unique_id

_ITEM_BASE = (
    "relative flex cursor-pointer select-none items-center rounded-sm px-2 py-1.5",
    "text-sm outline-none transition-colors focus:bg-accent focus:text-accent-foreground",
    "data-[disabled=true]:pointer-events-none data-[disabled=true]:opacity-50",
)

_ALIGN_CLASSES = {
    "end": "right-0 origin-top-right",
    "center": "left-1/2 -translate-x-1/2 origin-top",
}
_DEFAULT_ALIGN = "left-0 origin-top-left"

_DISABLED_STATE = "pointer-events-none opacity-50"
_ENABLED_STATE = "hover:bg-accent hover:text-accent-foreground"


def _menu_item(
    role: str,
    element_id: str,
    classes: str,
    value: str,
    index: int,
    disabled: bool,
    on_select: Callable[..., Any],
    children: list[Any],
    attributes: Optional[dict[str, Any]],
    extra_attrs: Optional[dict[str, Any]] = None,
) -> Node:
    attrs: dict[str, Any] = {
        "id": element_id,
        "class": classes,
        "role": role,
        "tabindex": "-1",
        "data-value": value,
        "data-index": str(index),
        "data-disabled": str(disabled).lower(),
    }
    attrs.update(extra_attrs or {})
    attrs.update(attributes or {})
    return Node("div", attrs, children, {"select": on_select})


def context_menu(
    *args: Any,
    id: Optional[str] = None,
    disabled: bool = False,
    aria_label: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build the context menu root; positional arguments are its trigger and content."""
    element_id = id_or(unique_id(), id)
    attrs: dict[str, Any] = {
        "class": join_classes("relative", "opacity-50 pointer-events-none" if disabled else ""),
        "id": element_id,
        "aria-disabled": "true" if disabled else "false",
        "aria-label": aria_label,
    }
    attrs.update(attributes or {})
    return Node("div", attrs, list(args))


def context_menu_trigger(*args: Any) -> Node:
    """Build the area that opens the context menu on right click."""
    return Node("div", {"data-context-menu-trigger": "true"}, list(args))


def context_menu_content(
    *args: Any,
    align: str = "start",
    width: str = "w-56",
    id: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build the floating menu panel; unknown alignments fall back to ``start``."""
    element_id = id_or(unique_id(), id)
    classes = " ".join(
        [
            "absolute mt-1 rounded-md bg-popover shadow-lg",
            "border border-border p-1 text-popover-foreground",
            "animate-in fade-in-80 data-[side=bottom]:slide-in-from-top-2",
            "data-[side=left]:slide-in-from-right-2 data-[side=right]:slide-in-from-left-2",
            "data-[side=top]:slide-in-from-bottom-2 z-50",
            _ALIGN_CLASSES.get(align, _DEFAULT_ALIGN),
            width,
        ]
    )
    attrs: dict[str, Any] = {"class": classes, "id": element_id, "role": "menu"}
    attrs.update(attributes or {})
    return Node("div", attrs, list(args))


def context_menu_label(
    *args: Any,
    id: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a non-interactive heading inside the menu."""
    element_id = id_or(unique_id(), id)
    attrs: dict[str, Any] = {
        "class": "px-2 py-1.5 text-xs font-semibold text-foreground/80",
        "id": element_id,
    }
    attrs.update(attributes or {})
    return Node("div", attrs, list(args))


def context_menu_separator(
    id: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a horizontal rule between groups of items."""
    element_id = id_or(unique_id(), id)
    attrs: dict[str, Any] = {
        "class": "h-px my-1 bg-muted",
        "id": element_id,
        "role": "separator",
        "aria-orientation": "horizontal",
    }
    attrs.update(attributes or {})
    return Node("div", attrs)


def context_menu_checkbox_item(
    *args: Any,
    value: str = "",
    index: int = 0,
    checked: bool = False,
    disabled: bool = False,
    id: Optional[str] = None,
    on_change: Optional[Callable[[bool], Any]] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build an item with a check mark; selecting it reports the toggled state."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(*_ITEM_BASE, _DISABLED_STATE if disabled else _ENABLED_STATE)

    def handle_select(_event: Any = None) -> Any:
        return on_change(not checked) if on_change is not None else None

    indicator = Node(
        "span",
        {"class": "mr-2 h-4 w-4 flex items-center justify-center border-none", "aria-hidden": "true"},
        [Node("svg", {"class": "h-4 w-4 text-current", "data-icon": "check"})] if checked else [],
    )
    return _menu_item(
        "menuitemcheckbox",
        element_id,
        classes,
        value,
        index,
        disabled,
        handle_select,
        [indicator, *args],
        attributes,
        {"aria-checked": str(checked).lower()},
    )


class ContextMenuRadioGroup:
    """A group of mutually exclusive items sharing one selected value."""

    def __init__(
        self,
        value: Union[Signal, str, None] = None,
        id: Optional[str] = None,
        on_value_change: Optional[Callable[[str], Any]] = None,
        attributes: Optional[dict[str, Any]] = None,
    ) -> None:
        self.value: Signal = value if isinstance(value, Signal) else Signal(value or "")
        self.id = id_or(unique_id(), id)
        self.on_value_change = on_value_change
        self.attributes = dict(attributes or {})

    def item(
        self,
        *args: Any,
        value: str = "",
        index: int = 0,
        disabled: bool = False,
        id: Optional[str] = None,
        attributes: Optional[dict[str, Any]] = None,
    ) -> Node:
        """Build a radio item; selecting it passes its value to the group's handler."""
        if self.on_value_change is None:
            raise RuntimeError("radio items need a group created with on_value_change")
        handler = self.on_value_change
        element_id = id_or(unique_id(), id)
        is_selected = self.value.value == value
        classes = join_classes(*_ITEM_BASE, _DISABLED_STATE if disabled else _ENABLED_STATE)

        def handle_select(_event: Any = None) -> Any:
            return handler(value)

        dot = Node(
            "span",
            {
                "class": "h-1.5 w-1.5 rounded-full bg-current",
                "style": "opacity: 1" if is_selected else "opacity: 0",
            },
        )
        indicator = Node(
            "span",
            {"class": "mr-2 h-3.5 w-3.5 flex items-center justify-center rounded-full border", "aria-hidden": "true"},
            [dot],
        )
        return _menu_item(
            "menuitemradio",
            element_id,
            classes,
            value,
            index,
            disabled,
            handle_select,
            [indicator, *args],
            attributes,
            {"aria-checked": str(is_selected).lower()},
        )

    def render(self, *args: Any) -> Node:
        """Build the group container holding ``args``."""
        attrs: dict[str, Any] = {"id": self.id, "role": "radiogroup", "class": "context-menu-radio-group"}
        attrs.update(self.attributes)
        return Node("div", attrs, list(args))


def context_menu_item(
    *args: Any,
    value: str = "",
    index: int = 0,
    disabled: bool = False,
    destructive: bool = False,
    icon: Optional[Node] = None,
    id: Optional[str] = None,
    on_select: Optional[Callable[[str], Any]] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a plain menu item; selecting it passes ``value`` to ``on_select``."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        *_ITEM_BASE,
        "disabled:pointer-events-none disabled:opacity-50 hover:bg-accent hover:text-accent-foreground",
        "text-destructive focus:text-destructive" if destructive else "",
    )

    def handle_select(_event: Any = None) -> Any:
        return on_select(value) if on_select is not None else None

    children: list[Any] = []
    if icon is not None:
        children.append(Node("span", {"class": "mr-2", "aria-hidden": "true"}, [icon]))
    children.extend(args)
    return _menu_item("menuitem", element_id, classes, value, index, disabled, handle_select, children, attributes)