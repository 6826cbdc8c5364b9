"""Styled dropdown menu with items, checkbox items, radio groups, labels and separators."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Callable, Optional, Union

from .core import Node, Signal, id_or, join_classes, unique_id

_ITEM_BASE = (
    "relative flex cursor-pointer select-none items-center rounded px-2 py-1.5",
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

_TRIGGER_MARK = "data-dropdown-trigger"
_CONTENT_MARK = "data-dropdown-content"


class DropdownSize(Enum):
    """Kept for compatibility; dropdowns no longer vary by size."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


def _menu_item(
    role: str,
    element_id: str,
    classes: str,
    value: str,
    index: int,
    disabled: bool,
    on_select: Callable[[], Any],
    children: list[Any],
    attributes: Optional[dict[str, Any]],
    extra_attrs: Optional[dict[str, Any]] = None,
) -> Node:
    def handle_select(_event: Any = None) -> Any:
        return None if disabled else on_select()

    attrs: dict[str, Any] = {
        "id": element_id,
        "class": classes,
        "role": role,
        "tabindex": "-1",
        "data-value": value,
        "data-index": str(index),
        "data-disabled": str(disabled).lower(),
        "aria-disabled": str(disabled).lower(),
    }
    attrs.update(extra_attrs or {})
    attrs.update(attributes or {})
    return Node("div", attrs, children, {"select": handle_select})


class Dropdown:
    """Root of a dropdown menu holding its open state.

    Losing focus closes the menu after ``close_delay`` seconds, so that a click
    on an item inside it can still be handled.
    """

    def __init__(
        self,
        default_open: bool = False,
        id: Optional[str] = None,
        disabled: bool = False,
        aria_label: Optional[str] = None,
        attributes: Optional[dict[str, Any]] = None,
        close_delay: float = 0.2,
    ) -> None:
        self.id = id_or(unique_id(), id)
        self.disabled = disabled
        self.aria_label = aria_label
        self.attributes = dict(attributes or {})
        self.close_delay = close_delay
        self.is_open: Signal = Signal(default_open)

    def set_open(self, open: bool) -> None:
        """Open or close the menu."""
        self.is_open.set(bool(open))

    def focus_out(self) -> threading.Timer:
        """Schedule the menu to close; returns the started timer."""
        timer = threading.Timer(self.close_delay, self.set_open, args=(False,))
        timer.daemon = True
        timer.start()
        return timer

    def _toggle(self, _event: Any = None) -> None:
        if not self.disabled:
            self.set_open(not self.is_open.value)

    def render(self, *args: Any) -> Node:
        """Build the dropdown around ``args``, wiring triggers and content to its state."""
        is_open = self.is_open.value
        state = "open" if is_open else "closed"
        inner = Node(
            "div",
            {"tabindex": "0"},
            list(args),
            {"focusout": lambda _event=None: self.focus_out()},
        )
        for node in inner.iter():
            if _TRIGGER_MARK in node.attrs:
                node.attrs["aria-expanded"] = str(is_open).lower()
                node.attrs["data-state"] = state
                node.handlers["click"] = self._toggle
            elif _CONTENT_MARK in node.attrs:
                node.attrs["data-state"] = state
                node.attrs["hidden"] = not is_open

        attrs: dict[str, Any] = {
            "class": join_classes(
                "relative inline-block text-left",
                "opacity-50 pointer-events-none" if self.disabled else "",
            ),
            "id": self.id,
            "data-state": state,
            "aria-disabled": "true" if self.disabled else "false",
            "aria-label": self.aria_label,
        }
        attrs.update(self.attributes)
        return Node("div", attrs, [inner], {"open_change": self.set_open})


def dropdown_trigger(
    *args: Any,
    disabled: bool = False,
    id: Optional[str] = None,
    aria_label: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build the button that opens the dropdown it is rendered inside."""
    element_id = id_or(unique_id(), id)
    attrs: dict[str, Any] = {
        "id": element_id,
        "type": "button",
        "aria-haspopup": "menu",
        "aria-label": aria_label,
        "aria-disabled": str(disabled).lower(),
        "disabled": disabled,
        _TRIGGER_MARK: "true",
    }
    attrs.update(attributes or {})
    return Node("button", attrs, list(args))


def dropdown_content(
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
            "absolute mt-2 rounded bg-popover shadow-md",
            "border border-border p-1 text-popover-foreground",
            "animate-in fade-in-80 data-[side=bottom]:slide-in-from-top-2",
            "data-[side=left]:slide-in-from-right-2 data-[side=right]:slide-in-from-left-2",
            "data-[side=top]:slide-in-from-bottom-2 z-50",
            _ALIGN_CLASSES.get(align, _DEFAULT_ALIGN),
            width,
        ]
    )
    attrs: dict[str, Any] = {"class": classes, "id": element_id, "role": "menu", _CONTENT_MARK: "true"}
    attrs.update(attributes or {})
    return Node("div", attrs, list(args))


def dropdown_label(
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


def dropdown_separator(
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


def dropdown_checkbox_item(
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

    def handle_select() -> Any:
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


class DropdownRadioGroup:
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

        def handle_select() -> Any:
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
        attrs: dict[str, Any] = {"id": self.id, "role": "radiogroup", "class": "dropdown-radio-group"}
        attrs.update(self.attributes)
        return Node("div", attrs, list(args))


def dropdown_item(
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
        "disabled:pointer-events-none disabled:opacity-50 hover:bg-secondary hover:text-accent-foreground",
        "text-destructive focus:text-destructive" if destructive else "",
    )

    def handle_select() -> Any:
        return on_select(value) if on_select is not None else None

    children: list[Any] = []
    if icon is not None:
        children.append(Node("span", {"class": "mr-2", "aria-hidden": "true"}, [icon]))
    children.extend(args)
    return _menu_item("menuitem", element_id, classes, value, index, disabled, handle_select, children, attributes)