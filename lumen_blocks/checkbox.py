"""Styled checkbox that toggles a shared boolean signal."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union

from .core import Node, Signal, unique_id


class CheckboxSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


_SIZE_CLASSES = {
    CheckboxSize.SMALL: ("h-4 w-4", "h-3 w-3"),
    CheckboxSize.MEDIUM: ("h-5 w-5", "h-4 w-4"),
    CheckboxSize.LARGE: ("h-6 w-6", "h-5 w-5"),
}


def checkbox(
    *args: Any,
    checked: Union[Signal, bool, None] = None,
    on_checked_change: Optional[Callable[[bool], Any]] = None,
    disabled: bool = False,
    size: CheckboxSize = CheckboxSize.MEDIUM,
    id: Optional[str] = None,
    name: Optional[str] = None,
    aria_label: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a checkbox; clicking it flips ``checked`` when a handler is given.

    Positional children are accepted but not rendered: the indicator is built in.
    """
    state = checked if isinstance(checked, Signal) else Signal(bool(checked))
    generated = unique_id()
    element_id = generated if id is None else id
    box_size, icon_size = _SIZE_CLASSES[size]
    is_checked = state.value

    class_ = "inline-flex items-center justify-center rounded border-2 transition-colors {} {} {}".format(
        box_size,
        "bg-primary border-primary" if is_checked else "bg-background border-input hover:bg-accent/10",
        "cursor-not-allowed opacity-50" if disabled else "cursor-pointer",
    )

    children: list[Any] = []
    if is_checked:
        children.append(
            Node(
                "div",
                {"class": f"flex items-center justify-center {icon_size}"},
                [Node("svg", {"class": "text-primary-foreground", "data-icon": "check"})],
            )
        )
    if name is not None:
        children.append(
            Node(
                "input",
                {
                    "type": "checkbox",
                    "id": f"{element_id}-input",
                    "name": name,
                    "checked": is_checked,
                    "disabled": disabled,
                    "class": "sr-only",
                },
            )
        )

    def handle_click(event: Any = None) -> None:
        if disabled or on_checked_change is None:
            return
        new_state = not state.value
        state.set(new_state)
        on_checked_change(new_state)

    attrs: dict[str, Any] = {
        "class": class_,
        "role": "checkbox",
        "aria-checked": str(is_checked).lower(),
        "id": element_id,
        "tabindex": "-1" if disabled else "0",
    }
    attrs.update(attributes or {})
    return Node("div", attrs, children, {"click": handle_click})