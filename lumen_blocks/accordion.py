"""Styled accordion container, items, triggers and collapsible content."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .core import Node, id_or, join_classes, unique_id

_CHEVRON_CLASSES = "group-aria-expanded:rotate-180 transition-all transition-ease-out "


def accordion(
    *args: Any,
    allow_multiple_open: bool = False,
    horizontal: bool = False,
    class_: Optional[str] = None,
) -> Node:
    """Build the accordion container; positional arguments are its items."""
    attrs: dict[str, Any] = {
        "class": join_classes("w-full", class_),
        "data-allow-multiple-open": str(allow_multiple_open).lower(),
        "data-orientation": "horizontal" if horizontal else "vertical",
    }
    return Node("div", attrs, list(args))


def accordion_item(
    *args: Any,
    index: int,
    class_: Optional[str] = None,
    on_change: Optional[Callable[[bool], Any]] = None,
    on_trigger_click: Optional[Callable[[], Any]] = None,
    id: Optional[str] = None,
) -> Node:
    """Build one accordion item at ``index``.

    The ``change`` handler forwards the new open state to ``on_change`` and the
    ``trigger_click`` handler calls ``on_trigger_click``; both are optional.
    """
    element_id = id_or(unique_id(), id)

    def handle_change(open_: bool) -> Any:
        return on_change(open_) if on_change is not None else None

    def handle_trigger_click() -> Any:
        return on_trigger_click() if on_trigger_click is not None else None

    attrs: dict[str, Any] = {
        "id": element_id,
        "class": join_classes("group border-b last:border-b-0 border-border", class_),
        "data-index": str(index),
    }
    return Node(
        "div",
        attrs,
        list(args),
        {"change": handle_change, "trigger_click": handle_trigger_click},
    )


def accordion_trigger(*args: Any, class_: Optional[str] = None, id: Optional[str] = None) -> Node:
    """Build the button that opens and closes an accordion item."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "flex w-full items-center text-left justify-between py-4 px-5 font-medium "
        "transition-all hover:underline group",
        class_,
    )
    chevron = Node("svg", {"class": _CHEVRON_CLASSES, "data-icon": "chevron-down"})
    return Node("button", {"id": element_id, "class": classes, "type": "button"}, [*args, chevron])


def accordion_content(*args: Any, class_: Optional[str] = None, id: Optional[str] = None) -> Node:
    """Build the panel shown when an accordion item is open."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "grid grid-rows-[0fr] transition-[grid-template-rows] duration-300 ease-out "
        "group-data-[open=true]:grid-rows-[1fr] text-sm",
        class_,
    )
    inner = Node(
        "div",
        {"class": "overflow-hidden"},
        [Node("div", {"class": "py-4 px-5"}, list(args))],
    )
    return Node("div", {"id": element_id, "class": classes}, [inner])