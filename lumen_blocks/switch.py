"""Styled on/off switch bound to a boolean signal."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Union

from .core import Node, Signal, id_or, join_classes, unique_id


class SwitchSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


# (track size, thumb size, thumb offset when off, thumb offset when on)
_SIZES = {
    SwitchSize.SMALL: ("h-[1.25rem] w-[2.25rem]", "h-[1rem] w-[1rem]", "translate-x-[0rem]", "translate-x-[1rem]"),
    SwitchSize.MEDIUM: (
        "h-[1.5rem] w-[2.75rem]",
        "h-[1.25rem] w-[1.25rem]",
        "translate-x-[0rem]",
        "translate-x-[1.25rem]",
    ),
    SwitchSize.LARGE: (
        "h-[1.75rem] w-[3.5rem]",
        "h-[1.5rem] w-[1.5rem]",
        "translate-x-[0rem]",
        "translate-x-[1.75rem]",
    ),
}


def switch(
    checked: Union[Signal, bool, None] = None,
    on_checked_change: Optional[Callable[[bool], Any]] = None,
    disabled: bool = False,
    size: SwitchSize = SwitchSize.MEDIUM,
    id: Optional[str] = None,
    aria_label: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a switch; clicking it flips ``checked`` and reports the new state."""
    state = checked if isinstance(checked, Signal) else Signal(bool(checked))
    element_id = id_or(unique_id(), id)
    track, thumb, offset_off, offset_on = _SIZES[size]
    is_checked = state.value
    data_state = "checked" if is_checked else "unchecked"

    track_classes = join_classes(
        "relative inline-flex shrink-0 cursor-pointer disabled:cursor-not-allowed disabled:opacity-50 "
        "rounded-full border-2 border-transparent",
        "transition-colors duration-300 ease-in-out focus:outline-none focus:ring-2",
        "focus:ring-ring focus:ring-offset-2 focus:ring-offset-background",
        "bg-primary" if is_checked else "bg-input",
        track,
    )
    thumb_classes = " ".join(
        [
            "pointer-events-none inline-block transform rounded-full bg-background shadow ring-0",
            "transition-transform duration-300 ease-in-out will-change-transform",
            thumb,
            offset_on if is_checked else offset_off,
        ]
    )

    def handle_click(_event: Any = None) -> None:
        if disabled:
            return
        new_state = not state.value
        state.set(new_state)
        if on_checked_change is not None:
            on_checked_change(new_state)

    attrs: dict[str, Any] = {
        "id": element_id,
        "class": track_classes,
        "type": "button",
        "role": "switch",
        "aria-checked": str(is_checked).lower(),
        "aria-label": aria_label,
        "data-state": data_state,
        "disabled": disabled,
    }
    attrs.update(attributes or {})
    thumb_node = Node("span", {"class": thumb_classes, "aria-hidden": "true", "data-state": data_state})
    return Node("button", attrs, [thumb_node], {"click": handle_click})