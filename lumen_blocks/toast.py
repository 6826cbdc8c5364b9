"""Transient notifications: a toast store, single toasts and the provider that lists them."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .button import ButtonVariant, button
from .core import Node, Signal

_MAX_TOASTS = 10

_ICONS = {
    "success": "check",
    "error": "x",
    "warning": "triangle-alert",
    "info": "info",
}

_ICON_CLASSES = {
    "success": "text-green-600 dark:text-green-400",
    "error": "text-red-600 dark:text-red-400",
    "warning": "text-yellow-600 dark:text-yellow-400",
    "info": "text-foreground",
}

_ARIA_LABELS = {
    "success": "Success:",
    "error": "Error:",
    "warning": "Warning:",
    "info": "Information:",
}


class ToastType(Enum):
    """Kind of toast, selecting its icon and colours."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def classes(self) -> str:
        return "border-border bg-popover text-foreground"

    def icon_classes(self) -> str:
        return _ICON_CLASSES[self.value]

    def aria_label(self) -> str:
        return _ARIA_LABELS[self.value]

    def icon(self) -> Node:
        return Node("svg", {"class": "size-5", "data-icon": _ICONS[self.value]})


@dataclass
class ToastItem:
    """One queued notification; ``duration`` is in seconds."""

    id: int
    title: str
    description: Optional[str] = None
    toast_type: ToastType = ToastType.INFO
    duration: Optional[float] = None
    permanent: bool = False
    visible: bool = True


@dataclass
class ToastOptions:
    """Optional settings for a new toast; ``duration`` is in seconds."""

    description: Optional[str] = None
    duration: Optional[float] = None
    permanent: bool = False


class Toasts:
    """Store of the toasts currently shown, holding at most ten."""

    def __init__(self) -> None:
        self.items: Signal = Signal([])
        self._next_id = 0
        self._lock = threading.Lock()

    def show(self, title: str, toast_type: ToastType, options: Optional[ToastOptions] = None) -> ToastItem:
        """Queue a toast and return it, dropping old ones beyond the limit."""
        opts = options if options is not None else ToastOptions()
        with self._lock:
            toast_id = self._next_id
            self._next_id += 1
            item = ToastItem(
                id=toast_id,
                title=title,
                description=opts.description,
                toast_type=toast_type,
                duration=None if opts.permanent else opts.duration,
                permanent=opts.permanent,
                visible=True,
            )
            items = [*self.items.value, item]
            while len(items) > _MAX_TOASTS:
                position = next((i for i, t in enumerate(items) if not t.permanent), 0)
                del items[position]
        self.items.set(items)
        return item

    def success(self, title: str, options: Optional[ToastOptions] = None) -> ToastItem:
        return self.show(title, ToastType.SUCCESS, options)

    def error(self, title: str, options: Optional[ToastOptions] = None) -> ToastItem:
        return self.show(title, ToastType.ERROR, options)

    def warning(self, title: str, options: Optional[ToastOptions] = None) -> ToastItem:
        return self.show(title, ToastType.WARNING, options)

    def info(self, title: str, options: Optional[ToastOptions] = None) -> ToastItem:
        return self.show(title, ToastType.INFO, options)

    def remove(self, toast_id: int) -> None:
        """Drop the toast with ``toast_id`` if it is still queued."""
        with self._lock:
            items = [t for t in self.items.value if t.id != toast_id]
        self.items.set(items)


_shared_toasts = Toasts()


def use_toast() -> Toasts:
    """Return the application-wide toast store."""
    return _shared_toasts


def toast(item: ToastItem, default_duration: float = 5.0, toasts: Optional[Toasts] = None) -> Node:
    """Build one toast; unless permanent it hides itself after its duration.

    A hidden toast is removed from the store when its exit animation ends.
    """
    store = toasts if toasts is not None else use_toast()

    def start_exit(_event: Any = None) -> None:
        item.visible = False

    def handle_animation_end(_event: Any = None) -> None:
        if not item.visible:
            store.remove(item.id)

    if not item.permanent and item.visible:
        duration = item.duration if item.duration is not None else default_duration
        timer = threading.Timer(duration, start_exit)
        timer.daemon = True
        timer.start()

    base = (
        "pointer-events-auto relative flex w-full items-center justify-between space-x-4 overflow-hidden "
        "rounded-md border p-4 shadow-md hover:shadow-lg transition-all duration-300 group backdrop-blur-sm"
    )
    animation = "animate-slide-in-from-right" if item.visible else "animate-slide-out-to-right"

    text: list[Any] = [
        Node(
            "div",
            {"class": "text-sm font-semibold leading-none tracking-tight", "id": f"toast-title-{item.id}"},
            [item.title],
        )
    ]
    if item.description is not None:
        text.append(
            Node("div", {"class": "text-sm opacity-90", "id": f"toast-desc-{item.id}"}, [item.description])
        )

    body = Node(
        "div",
        {"class": "flex items-center space-x-3 flex-1"},
        [
            Node(
                "div",
                {
                    "class": f"flex-shrink-0 {item.toast_type.icon_classes()}",
                    "aria-label": item.toast_type.aria_label(),
                },
                [item.toast_type.icon()],
            ),
            Node("div", {"class": "flex-1 space-y-1"}, text),
        ],
    )

    close = button(
        Node("svg", {"class": "size-4", "data-icon": "x"}),
        variant=ButtonVariant.GHOST,
        is_icon_button=True,
        aria_label="Close",
        on_click=start_exit,
        attributes={"class": "absolute right-2 top-2 opacity-0 group-hover:opacity-100"},
    )

    attrs: dict[str, Any] = {
        "role": "alert",
        "class": f"{base} {animation} {item.toast_type.classes()}",
        "tabindex": "0",
        "aria-labelledby": f"toast-title-{item.id}",
        "aria-describedby": f"toast-desc-{item.id}" if item.description is not None else None,
    }
    return Node("div", attrs, [body, close], {"animationend": handle_animation_end})


def toast_provider(
    *args: Any,
    default_duration: float = 5.0,
    max_toasts: int = 10,
    toasts: Optional[Toasts] = None,
) -> Node:
    """Render ``args`` followed by the overlay listing the queued toasts.

    ``max_toasts`` is accepted for compatibility; the store itself caps the list at ten.
    """
    store = toasts if toasts is not None else use_toast()
    container = Node(
        "div",
        {
            "class": "fixed top-4 right-4 z-50 flex flex-col space-y-2 max-w-sm items-end pointer-events-none",
            "aria-live": "polite",
            "aria-atomic": "true",
        },
        [toast(item, default_duration, store) for item in store.items.value],
    )
    return Node("div", {"class": "contents"}, [*args, container])