"""Panel that slides in from the side of the screen, with overlay and layout parts."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .core import Node, Signal


class SideSheetSide(Enum):
    """Edge of the screen the sheet slides in from."""

    LEFT = "left"
    RIGHT = "right"

    def content_classes(self) -> str:
        """Return the positioning classes for the sheet panel."""
        if self is SideSheetSide.LEFT:
            return "inset-y-0 left-0 h-full w-3/4 sm:max-w-sm"
        return "inset-y-0 right-0 h-full w-3/4 sm:max-w-sm"

    def animation_classes(self, is_open: bool) -> str:
        """Return the translation classes for the open or closed sheet."""
        if is_open:
            return "translate-x-0"
        return "-translate-x-full" if self is SideSheetSide.LEFT else "translate-x-full"


class SideSheet:
    """Holds the open state shared by a sheet's trigger, content and close controls."""

    def __init__(self, side: SideSheetSide = SideSheetSide.RIGHT, default_open: bool = False) -> None:
        self.side = side
        self.is_open: Signal = Signal(bool(default_open))

    def _open(self, _event: Any = None) -> None:
        self.is_open.set(True)

    def _close(self, _event: Any = None) -> None:
        self.is_open.set(False)

    def render(self, *args: Any) -> Node:
        """Wrap ``args`` in a layout-neutral container carrying the sheet state."""
        state = "open" if self.is_open.value else "closed"
        return Node("div", {"class": "contents", "data-state": state}, list(args))

    def trigger(self, *args: Any) -> Node:
        """Build an element whose click opens the sheet."""
        return Node("div", {"class": "w-auto inline-block"}, list(args), {"click": self._open})

    def close(self, *args: Any) -> Node:
        """Build an element whose click closes the sheet."""
        return Node("div", {}, list(args), {"click": self._close})

    def overlay(self, class_: str = "bg-black/80") -> Node:
        """Build the backdrop behind the sheet; clicking it closes the sheet."""
        classes = (
            f"fixed inset-0 z-50 {class_} data-[state=open]:animate-in data-[state=closed]:animate-out "
            "data-[state=closed]:fade-out-0 data-[state=open]:fade-in-0 data-[state=closed]:hidden"
        )
        attrs: dict[str, Any] = {
            "class": classes,
            "data-state": "open" if self.is_open.value else "closed",
            "aria-hidden": "true",
        }
        return Node("div", attrs, handlers={"click": self._close})

    def content(self, *args: Any, class_: str = "") -> Node:
        """Build the overlay and the sliding dialog panel holding ``args``."""
        is_open = self.is_open.value
        panel_classes = (
            "fixed z-50 bg-background border-l border-border shadow-lg transition ease-in-out duration-300 "
            f"{self.side.content_classes()} {self.side.animation_classes(is_open)} {class_}"
        )
        panel = Node(
            "div",
            {
                "class": panel_classes,
                "role": "dialog",
                "aria-modal": "true",
                "aria-labelledby": "side-sheet-title",
                "aria-describedby": "side-sheet-description",
            },
            list(args),
        )
        return Node("div", {"class": "fixed z-50"}, [self.overlay(), panel])

    def close_button(self, class_: str = "") -> Node:
        """Build the corner button with an X icon that closes the sheet."""
        classes = (
            "absolute right-4 top-4 rounded-sm opacity-70 ring-offset-background transition-opacity "
            "hover:opacity-100 focus:outline-none focus:ring-2 focus:ring-ring focus:ring-offset-2 "
            f"disabled:pointer-events-none data-[state=open]:bg-secondary {class_}"
        )
        icon = Node("svg", {"class": "h-6 w-6", "data-icon": "x"})
        return Node(
            "button",
            {"class": classes, "type": "button", "aria-label": "Close"},
            [icon],
            {"click": self._close},
        )


def side_sheet_header(*args: Any, class_: str = "") -> Node:
    """Build the header block at the top of the sheet."""
    return Node("div", {"class": f"flex flex-col space-y-2 text-center sm:text-left {class_}"}, list(args))


def side_sheet_title(*args: Any, class_: str = "") -> Node:
    """Build the sheet title, which labels the dialog."""
    return Node(
        "h2",
        {"id": "side-sheet-title", "class": f"text-lg font-semibold leading-none tracking-tight {class_}"},
        list(args),
    )


def side_sheet_description(*args: Any, class_: str = "") -> Node:
    """Build the sheet description, which describes the dialog."""
    return Node(
        "p",
        {"id": "side-sheet-description", "class": f"text-sm text-muted-foreground {class_}"},
        list(args),
    )


def side_sheet_body(*args: Any, class_: str = "") -> Node:
    """Build the scrolling main area of the sheet."""
    return Node("div", {"class": f"flex-1 overflow-y-auto {class_}"}, list(args))


def side_sheet_footer(*args: Any, class_: str = "") -> Node:
    """Build the footer row holding action buttons."""
    return Node("div", {"class": f"flex gap-2 {class_}"}, list(args))