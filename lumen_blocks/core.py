"""Element tree, reactive values, id generation and class-list helpers."""

from __future__ import annotations

import html
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if item is None or item is False:
            continue
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


@dataclass
class Node:
    """An element with attributes, children and event handlers."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)
    handlers: dict[str, Callable[..., Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.children = list(_flatten(self.children))
        for child in self.children:
            if not isinstance(child, (Node, str)):
                raise TypeError(f"child of <{self.tag}> must be a Node or str, not {type(child).__name__}")

    def iter(self) -> Iterator[Node]:
        """Yield this node and every descendant node, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find(self, predicate: Callable[[Node], bool]) -> Optional[Node]:
        """Return the first node in the tree matching ``predicate``, or None."""
        return next((node for node in self.iter() if predicate(node)), None)

    def find_all(self, predicate: Callable[[Node], bool]) -> list[Node]:
        """Return all nodes in the tree matching ``predicate``."""
        return [node for node in self.iter() if predicate(node)]

    def trigger(self, event: str, *args: Any) -> Any:
        """Call the handler registered for ``event`` and return its result."""
        try:
            handler = self.handlers[event]
        except KeyError:
            raise KeyError(f"<{self.tag}> has no handler for {event!r}") from None
        return handler(*args)

    def to_html(self) -> str:
        """Render the tree as HTML markup."""
        parts = [f"<{self.tag}"]
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{html.escape(str(value), quote=True)}"')
        parts.append(">")
        if self.tag in _VOID_TAGS:
            return "".join(parts)
        for child in self.children:
            parts.append(child.to_html() if isinstance(child, Node) else html.escape(child, quote=False))
        parts.append(f"</{self.tag}>")
        return "".join(parts)


class Signal(Generic[T]):
    """A value holder that notifies subscribers whenever it is set."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Callable[[T], Any]] = []

    @property
    def value(self) -> T:
        return self._value

    def __call__(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[T], Any]) -> Callable[[], None]:
        """Register ``callback``; the returned function unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"


class IdGenerator:
    """Thread-safe source of runtime-unique element ids."""

    def __init__(self, prefix: str = "dxc-") -> None:
        self.prefix = prefix
        self._lock = threading.Lock()
        self._next = 0

    def next_id(self) -> str:
        with self._lock:
            number = self._next
            self._next += 1
        return f"{self.prefix}{number}"

    def reset(self) -> None:
        with self._lock:
            self._next = 0


_default_ids = IdGenerator()


def unique_id() -> str:
    """Return a new id from the shared generator."""
    return _default_ids.next_id()


def reset_ids() -> None:
    """Restart the shared id generator from zero."""
    _default_ids.reset()


def id_or(generated: str, user_id: Optional[str]) -> str:
    """Prefer a user-supplied id over a generated one."""
    return generated if user_id is None else user_id


def join_classes(*args: Optional[str]) -> str:
    """Join the non-empty class strings with single spaces."""
    return " ".join(cls for cls in args if cls)


def prepend_classes(extra: Optional[str], defaults: str) -> str:
    """Put user classes in front of the default classes."""
    return defaults if extra is None else f"{extra} {defaults}"