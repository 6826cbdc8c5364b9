"""Styled collapsible panel with a trigger and expandable content."""

from __future__ import annotations

from typing import Any, Optional

from .core import Node, id_or, join_classes, unique_id

_CHEVRON_CLASSES = "h-4 w-4 shrink-0 transition-transform duration-200 data-[state=open]:rotate-180"


def collapsible(*args: Any, class_: Optional[str] = None, id: Optional[str] = None) -> Node:
    """Build the collapsible container."""
    element_id = id_or(unique_id(), id)
    classes = join_classes("w-full border border-border rounded-lg", class_)
    return Node("div", {"id": element_id, "class": classes}, list(args))


def collapsible_trigger(*args: Any, class_: Optional[str] = None, id: Optional[str] = None) -> Node:
    """Build the button that toggles the collapsible content."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "flex w-full items-center justify-between py-4 px-4 font-medium transition-all "
        "hover:underline [&[data-state=open]>svg]:rotate-180",
        class_,
    )
    chevron = Node("svg", {"class": _CHEVRON_CLASSES, "data-icon": "chevron-down"})
    return Node("button", {"id": element_id, "class": classes, "type": "button"}, [*args, chevron])


def collapsible_content(*args: Any, class_: Optional[str] = None, id: Optional[str] = None) -> Node:
    """Build the content revealed when the collapsible is open."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "overflow-hidden text-sm px-4 data-[state=closed]:animate-collapsible-up "
        "data-[state=open]:animate-collapsible-down",
        class_,
    )
    inner = Node("div", {"class": "pb-4 pt-0"}, list(args))
    return Node("div", {"id": element_id, "class": classes}, [inner])