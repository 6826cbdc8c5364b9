"""Styled button with variants, sizes, icons and a loading state."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional

from .core import Node, id_or, join_classes, unique_id

logger = logging.getLogger(__name__)


class ButtonVariant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OUTLINE = "outline"
    GHOST = "ghost"
    LINK = "link"
    DESTRUCTIVE = "destructive"


class ButtonSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


_VARIANT_CLASSES = {
    ButtonVariant.PRIMARY: "bg-primary text-primary-foreground hover:bg-primary/90 border-transparent focus:ring-ring",
    ButtonVariant.SECONDARY: "bg-secondary text-secondary-foreground hover:bg-secondary/80 border-transparent focus:ring-ring",
    ButtonVariant.OUTLINE: "bg-background text-foreground hover:bg-muted border-border focus:ring-ring",
    ButtonVariant.GHOST: "bg-transparent text-foreground hover:bg-muted border-transparent focus:ring-ring",
    ButtonVariant.LINK: "bg-transparent text-primary underline-offset-4 underline border-transparent p-0 shadow-none focus:ring-ring",
    ButtonVariant.DESTRUCTIVE: "bg-destructive text-primary-foreground dark:text-foreground hover:bg-destructive/90 border-transparent focus:ring-ring",
}

_ICON_SIZE_CLASSES = {
    ButtonSize.SMALL: "p-1.5 text-sm",
    ButtonSize.MEDIUM: "p-2 text-base",
    ButtonSize.LARGE: "p-3 text-lg",
}

_TEXT_SIZE_CLASSES = {
    ButtonSize.SMALL: "text-xs px-2.5 py-1",
    ButtonSize.MEDIUM: "text-sm px-4 py-1.5",
    ButtonSize.LARGE: "text-base px-6 py-2",
}


def _icon(name: str, class_: str) -> Node:
    return Node("svg", {"class": class_, "data-icon": name})


def _bool_str(value: Optional[bool]) -> Optional[str]:
    return None if value is None else str(value).lower()


def button_classes(
    variant: ButtonVariant = ButtonVariant.PRIMARY,
    size: ButtonSize = ButtonSize.MEDIUM,
    is_icon_button: bool = False,
    full_width: bool = False,
    disabled: bool = False,
    loading: bool = False,
) -> str:
    """Return the class list for a button in the given state."""
    sizes = _ICON_SIZE_CLASSES if is_icon_button else _TEXT_SIZE_CLASSES
    width = "w-full" if full_width and not is_icon_button else "w-auto"
    return join_classes(
        "inline-flex items-center justify-center font-medium rounded border",
        "transition-colors focus:outline-none focus:ring-2 focus:ring-offset-2",
        _VARIANT_CLASSES[variant],
        sizes[size],
        width,
        "aspect-square" if is_icon_button else "",
        "opacity-50 cursor-not-allowed" if disabled or loading else "cursor-pointer",
    )


def button(
    *args: Any,
    button_type: str = "button",
    variant: ButtonVariant = ButtonVariant.PRIMARY,
    size: ButtonSize = ButtonSize.MEDIUM,
    disabled: bool = False,
    loading: bool = False,
    full_width: bool = False,
    is_icon_button: bool = False,
    on_click: Optional[Callable[[Any], Any]] = None,
    name: str = "",
    value: str = "",
    id: Optional[str] = None,
    icon_left: Optional[Node] = None,
    icon_right: Optional[Node] = None,
    aria_label: Optional[str] = None,
    aria_labelledby: Optional[str] = None,
    aria_describedby: Optional[str] = None,
    aria_controls: Optional[str] = None,
    aria_expanded: Optional[bool] = None,
    aria_pressed: Optional[bool] = None,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a button element; positional arguments are its content."""
    element_id = id_or(unique_id(), id)

    if is_icon_button and aria_label is None and aria_labelledby is None:
        logger.warning(
            "Icon button missing aria-label or aria-labelledby attribute. "
            "This may cause accessibility issues."
        )

    inactive = disabled or loading
    attrs: dict[str, Any] = {
        "id": element_id,
        "type": button_type,
        "name": name,
        "value": value,
        "disabled": inactive,
        "class": button_classes(variant, size, is_icon_button, full_width, disabled, loading),
        "aria-label": "Button" if is_icon_button and aria_label is None else aria_label,
        "aria-labelledby": aria_labelledby,
        "aria-describedby": aria_describedby,
        "aria-controls": aria_controls,
        "aria-expanded": _bool_str(aria_expanded),
        "aria-pressed": _bool_str(aria_pressed),
        "aria-disabled": _bool_str(inactive),
    }
    extra = dict(attributes or {})
    if "class" in extra:
        attrs["class"] = join_classes(attrs["class"], extra.pop("class"))
    attrs.update(extra)

    if is_icon_button:
        if loading:
            content: list[Any] = [
                Node(
                    "span",
                    {"class": "animate-spin inline-block", "aria-hidden": "true"},
                    [_icon("loader-circle", "h-4 w-4")],
                )
            ]
        else:
            content = list(args)
    else:
        content = []
        if loading:
            content.append(Node("span", children=[_icon("loader-circle", "mr-1 inline-block animate-spin h-4")]))
        if icon_left is not None:
            content.append(Node("span", {"class": "mr-2", "aria-hidden": "true"}, [icon_left]))
        content.extend(args)
        if icon_right is not None:
            content.append(Node("span", {"class": "ml-2", "aria-hidden": "true"}, [icon_right]))

    def handle_click(event: Any = None) -> Any:
        return on_click(event) if on_click is not None else None

    return Node("button", attrs, content, {"click": handle_click})