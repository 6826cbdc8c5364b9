"""Styled text input with variants, sizes and optional icons."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional

from .core import Node, id_or, join_classes, unique_id


class InputSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class InputVariant(Enum):
    DEFAULT = "default"
    ERROR = "error"


_VARIANT_CLASSES = {
    InputVariant.DEFAULT: "border-input focus:border-ring",
    InputVariant.ERROR: "border-destructive focus:border-destructive",
}

_SIZE_CLASSES = {
    InputSize.SMALL: "text-xs px-2 py-1 h-8",
    InputSize.MEDIUM: "text-sm px-3 py-1.5 h-10",
    InputSize.LARGE: "text-base px-4 py-2 h-12",
}

_PADDING_LEFT = {InputSize.SMALL: "pl-7", InputSize.MEDIUM: "pl-9", InputSize.LARGE: "pl-10"}
_PADDING_RIGHT = {InputSize.SMALL: "pr-7", InputSize.MEDIUM: "pr-9", InputSize.LARGE: "pr-10"}


def input_classes(
    variant: InputVariant = InputVariant.DEFAULT,
    size: InputSize = InputSize.MEDIUM,
    full_width: bool = False,
    disabled: bool = False,
    has_icon_left: bool = False,
    has_icon_right: bool = False,
    class_: Optional[str] = None,
) -> str:
    """Return the class list for an input in the given state."""
    return join_classes(
        "rounded border text-foreground",
        "transition-colors focus:outline-none focus:ring-2 focus:ring-ring focus:ring-offset-2",
        _VARIANT_CLASSES[variant],
        _SIZE_CLASSES[size],
        "w-full" if full_width else "w-auto",
        "opacity-50 cursor-not-allowed bg-muted" if disabled else "bg-background",
        _PADDING_LEFT[size] if has_icon_left else "",
        _PADDING_RIGHT[size] if has_icon_right else "",
        class_,
    )


def _forward(callback: Optional[Callable[[Any], Any]]) -> Callable[..., Any]:
    def handler(event: Any = None) -> Any:
        return callback(event) if callback is not None else None

    return handler


def text_input(
    input_type: str = "text",
    variant: InputVariant = InputVariant.DEFAULT,
    size: InputSize = InputSize.MEDIUM,
    disabled: bool = False,
    readonly: bool = False,
    required: bool = False,
    placeholder: str = "",
    value: str = "",
    full_width: bool = False,
    icon_left: Optional[Node] = None,
    icon_right: Optional[Node] = None,
    on_change: Optional[Callable[[Any], Any]] = None,
    on_focus: Optional[Callable[[Any], Any]] = None,
    on_blur: Optional[Callable[[Any], Any]] = None,
    name: str = "",
    id: Optional[str] = None,
    aria_label: Optional[str] = None,
    aria_labelledby: Optional[str] = None,
    aria_describedby: Optional[str] = None,
    class_: Optional[str] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build an input wrapped in a positioned container holding its icons."""
    element_id = id_or(unique_id(), id)
    attrs: dict[str, Any] = {
        "id": element_id,
        "type": input_type,
        "name": name,
        "placeholder": placeholder,
        "value": value,
        "disabled": disabled,
        "readonly": readonly,
        "required": required,
        "class": input_classes(
            variant, size, full_width, disabled, icon_left is not None, icon_right is not None, class_
        ),
        "aria-label": aria_label,
        "aria-labelledby": aria_labelledby,
        "aria-describedby": aria_describedby,
        "aria-disabled": str(disabled).lower(),
        "aria-required": str(required).lower(),
    }
    attrs.update(attributes or {})
    field_node = Node(
        "input",
        attrs,
        handlers={"change": _forward(on_change), "focus": _forward(on_focus), "blur": _forward(on_blur)},
    )

    children: list[Any] = []
    if icon_left is not None:
        children.append(
            Node(
                "div",
                {"class": "absolute left-0 inset-y-0 flex items-center pl-2 text-foreground", "aria-hidden": "true"},
                [icon_left],
            )
        )
    children.append(field_node)
    if icon_right is not None:
        children.append(
            Node(
                "div",
                {"class": "absolute right-0 inset-y-0 flex items-center pr-2 text-foreground", "aria-hidden": "true"},
                [icon_right],
            )
        )
    return Node("div", {"class": "relative"}, children)