"""Card that floats next to its trigger while the trigger is hovered."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .core import Node, prepend_classes


class HoverCardSide(Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


class HoverCardAlign(Enum):
    START = "start"
    CENTER = "center"
    END = "end"


def hover_card(*args: Any, class_: Optional[str] = None) -> Node:
    """Build the hover card container."""
    return Node("div", {"class": prepend_classes(class_, "relative inline-block")}, list(args))


def hover_card_trigger(*args: Any, class_: Optional[str] = None) -> Node:
    """Build the element whose hovering reveals the card."""
    return Node(
        "div",
        {"class": prepend_classes(class_, "cursor-pointer focus:outline-none"), "tabindex": "0"},
        list(args),
    )


def hover_card_content(
    *args: Any,
    class_: Optional[str] = None,
    side: Optional[HoverCardSide] = None,
    align: Optional[HoverCardAlign] = None,
) -> Node:
    """Build the floating card; it sits on top, centred, unless told otherwise."""
    defaults = (
        "pointer-events-none opacity-0 data-[state=open]:pointer-events-auto "
        "data-[state=open]:opacity-100 absolute top-full z-50 transition-all duration-200 py-2"
    )
    chosen_side = HoverCardSide.TOP if side is None else side
    chosen_align = HoverCardAlign.CENTER if align is None else align
    card = Node(
        "div",
        {"class": "min-w-[16rem] max-w-[22rem] bg-popover border border-border rounded-xl shadow-xl p-5"},
        list(args),
    )
    attrs: dict[str, Any] = {
        "class": prepend_classes(class_, defaults),
        "data-side": chosen_side.value,
        "data-align": chosen_align.value,
    }
    return Node("div", attrs, [card])