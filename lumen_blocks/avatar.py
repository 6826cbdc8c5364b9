"""Circular avatar with an image and a fallback shown when it fails."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .core import Node, id_or, join_classes, unique_id


def avatar(
    *args: Any,
    class_: Optional[str] = None,
    id: Optional[str] = None,
    on_state_change: Optional[Callable[[Any], Any]] = None,
) -> Node:
    """Build the avatar container; its ``state_change`` handler forwards to ``on_state_change``."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "relative inline-flex h-10 w-10 shrink-0 overflow-hidden rounded-full border "
        "border-border bg-muted group",
        class_,
    )

    def handle_state_change(state: Any) -> Any:
        return on_state_change(state) if on_state_change is not None else None

    return Node(
        "span",
        {"id": element_id, "class": classes},
        list(args),
        {"state_change": handle_state_change},
    )


def avatar_image(
    src: str,
    alt: str,
    class_: Optional[str] = None,
    id: Optional[str] = None,
) -> Node:
    """Build the avatar image element."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "aspect-square h-full w-full object-cover group-data-[state=error]:hidden",
        class_,
    )
    return Node("img", {"id": element_id, "class": classes, "src": src, "alt": alt})


def avatar_fallback(*args: Any, class_: Optional[str] = None, id: Optional[str] = None) -> Node:
    """Build the fallback content shown in place of the image."""
    element_id = id_or(unique_id(), id)
    classes = join_classes(
        "flex h-full w-full items-center justify-center rounded-full bg-muted text-sm "
        "font-medium text-muted-foreground",
        class_,
    )
    return Node("span", {"id": element_id, "class": classes}, list(args))