"""Styled progress bar with sizes, colour variants and an optional percentage."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional, Union

from .core import Node, Signal


class ProgressSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ProgressVariant(Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"
    SUCCESS = "success"
    WARNING = "warning"


_HEIGHT_CLASSES = {
    ProgressSize.SMALL: "h-2",
    ProgressSize.MEDIUM: "h-3",
    ProgressSize.LARGE: "h-4",
}

_INDICATOR_COLORS = {
    ProgressVariant.DEFAULT: "bg-primary",
    ProgressVariant.DESTRUCTIVE: "bg-destructive",
    ProgressVariant.SUCCESS: "bg-green-500",
    ProgressVariant.WARNING: "bg-yellow-500",
}


def progress_percentage(value: float, max: float = 100.0) -> float:
    """Return ``value`` as a percentage of ``max``, clamped to 0..100.

    An undefined ratio (such as 0 of 0) counts as complete.
    """
    if max == 0:
        ratio = math.nan if value == 0 or math.isnan(value) else math.copysign(math.inf, value)
    else:
        ratio = value / max * 100.0
    if math.isnan(ratio):
        return 100.0
    return min(100.0, max_(ratio, 0.0))


def max_(a: float, b: float) -> float:
    return a if a > b else b


def _format_number(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else repr(float(number))


def progress(
    value: Union[float, Signal],
    max: float = 100.0,
    size: ProgressSize = ProgressSize.MEDIUM,
    variant: ProgressVariant = ProgressVariant.DEFAULT,
    id: Optional[str] = None,
    aria_label: Optional[str] = None,
    show_percentage: bool = False,
    class_: Optional[str] = None,
) -> Node:
    """Build a progress bar for ``value`` out of ``max``."""
    current = float(value.value if isinstance(value, Signal) else value)
    percentage = progress_percentage(current, max)

    container_class = f"relative w-full overflow-hidden rounded-full bg-secondary {_HEIGHT_CLASSES[size]}"
    if class_ is not None:
        container_class = f"{container_class} {class_}"
    indicator_class = f"h-full transition-all duration-300 ease-in-out {_INDICATOR_COLORS[variant]}"

    indicator = Node("div", {"class": indicator_class, "style": f"width: {_format_number(percentage)}%"})
    bar = Node(
        "div",
        {
            "class": container_class,
            "id": id,
            "role": "progressbar",
            "aria-valuemin": "0",
            "aria-valuemax": _format_number(max),
            "aria-valuenow": _format_number(current),
        },
        [indicator],
    )

    children: list[Any] = []
    if show_percentage:
        children.append(
            Node(
                "div",
                {"class": "flex justify-between text-sm text-muted-foreground"},
                [
                    Node("span", children=[aria_label if aria_label is not None else "Progress"]),
                    Node("span", children=[f"{percentage:.0f}%"]),
                ],
            )
        )
    children.append(bar)
    return Node("div", {"class": "w-full space-y-2"}, children)