"""Form label with sizes, a disabled look and a required marker."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from .core import Node, id_or, join_classes, unique_id


class LabelSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


_SIZE_CLASSES = {
    LabelSize.SMALL: "text-xs",
    LabelSize.MEDIUM: "text-sm",
    LabelSize.LARGE: "text-base",
}


def label(
    *args: Any,
    for_id: Optional[str] = None,
    size: LabelSize = LabelSize.MEDIUM,
    required: bool = False,
    id: Optional[str] = None,
    class_: Optional[str] = None,
    disabled: bool = False,
    attributes: Optional[dict[str, Any]] = None,
) -> Node:
    """Build a label for the control ``for_id``; positional arguments are its text."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "font-medium mb-1.5 block",
        _SIZE_CLASSES[size],
        "text-muted-foreground cursor-not-allowed opacity-70" if disabled else "text-foreground",
        class_,
    )
    attrs: dict[str, Any] = {"id": element_id, "class": classes, "for": for_id}
    attrs.update(attributes or {})

    children: list[Any] = list(args)
    if required:
        children.append(Node("span", {"class": "ml-1 text-destructive", "aria-hidden": "true"}, ["*"]))
    return Node("label", attrs, children)