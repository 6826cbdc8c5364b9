"""Container that keeps its content at a fixed width-to-height ratio."""

from __future__ import annotations

from typing import Any, Optional

from .core import Node, id_or, join_classes, unique_id


def aspect_ratio(
    *args: Any,
    ratio: float,
    id: Optional[str] = None,
    class_: Optional[str] = None,
) -> Node:
    """Build a container holding ``args`` at ``ratio`` (width / height)."""
    element_id = id_or(unique_id(), id)
    attrs: dict[str, Any] = {
        "id": element_id,
        "class": join_classes("relative w-full overflow-hidden", class_),
        "data-ratio": str(ratio),
    }
    return Node("div", attrs, list(args))