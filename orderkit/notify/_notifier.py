"""
Notifier — event dispatch with dependency injection by type.

Core idea:
- Event[T] is the base class for UI triggers; T is what its handler returns
- Handlers are plain functions; parameters are filled by annotation:
  the event itself (or any unannotated parameter), or a dependency
  injected with .inject()
- dispatch() runs the handler synchronously and hands the new value to
  every listener subscribed to that event type

Example:
    @dataclass(frozen=True, slots=True)
    class LineItemAdded(Event[CartSnapshot]):
        line_item: LineItem

    def add_line_item(event: LineItemAdded, cart: Cart) -> CartSnapshot:
        return cart.add(event.line_item)

    bus = notifier().on(LineItemAdded, add_line_item).compile().inject(Cart, cart)
    bus.subscribe(LineItemAdded, render_totals)
    result = bus.dispatch(LineItemAdded(item))   # Ok(CartSnapshot)
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, cast, get_type_hints

from kungfu import Result, Ok, Error

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

HandlerFunc = Callable[..., Any]
type Listener[V] = Callable[[V], None]


class Event(ABC, Generic[T_co]):
    """Base class for events. T_co is the value the handler computes."""

    __slots__ = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class DispatchError:
    code: str
    message: str


class DispatchErrors:
    @staticmethod
    def not_registered(event_type: type[Any]) -> DispatchError:
        return DispatchError("NOT_REGISTERED", f"No handler for {event_type.__name__}")

    @staticmethod
    def missing_dependency(param: str, typ: object) -> DispatchError:
        name = getattr(typ, "__name__", repr(typ))
        return DispatchError("MISSING_DEPENDENCY", f"Nothing injected for {param}: {name}")


# ═══════════════════════════════════════════════════════════════════════════════
# Registration
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class _Registration:
    """Event type → handler + its resolved parameter types."""
    event_type: type[Event[Any]]
    handler: HandlerFunc
    params: tuple[tuple[str, Any], ...]


def _handler_params(handler: HandlerFunc) -> tuple[tuple[str, Any], ...]:
    sig = inspect.signature(handler)
    hints = get_type_hints(handler)
    return tuple(
        (pname, hints.get(pname, p.annotation))
        for pname, p in sig.parameters.items()
    )


@dataclass(slots=True, frozen=True)
class NotifierBuilder:
    """Builder for event handlers."""
    _items: tuple[tuple[type[Event[Any]], HandlerFunc], ...] = ()

    def on(self, event_type: type[Event[Any]], handler: HandlerFunc) -> NotifierBuilder:
        """Register handler for event type."""
        # Last registration wins
        others = tuple(i for i in self._items if i[0] is not event_type)
        return NotifierBuilder(_items=(*others, (event_type, handler)))

    def compile(self) -> Notifier:
        registrations = {
            event_type: _Registration(
                event_type=event_type,
                handler=handler,
                params=_handler_params(handler),
            )
            for event_type, handler in self._items
        }
        return Notifier(_registry=registrations)


# ═══════════════════════════════════════════════════════════════════════════════
# Notifier
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class Notifier:
    """
    Compiled dispatcher.

    Runs one handler per event, to completion, before returning. Listeners
    are called in subscription order with the handler's value; their
    exceptions propagate to the caller of dispatch().
    """
    _registry: dict[type[Event[Any]], _Registration]
    _deps: dict[Any, object] = field(default_factory=dict)
    _listeners: dict[type[Event[Any]], list[Listener[Any]]] = field(default_factory=dict)

    def inject(self, typ: type[object], impl: object) -> Notifier:
        """Inject shared dependency."""
        self._deps[typ] = impl
        return self

    def subscribe[V](
        self,
        event_type: type[Event[V]],
        listener: Listener[V],
    ) -> Callable[[], None]:
        """Subscribe to values computed for event_type. Returns an unsubscribe callable."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(listener)

        def unsubscribe() -> None:
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def _arguments(self, reg: _Registration, event: Event[Any]) -> Result[dict[str, Any], DispatchError]:
        kwargs: dict[str, Any] = {}
        for pname, ptype in reg.params:
            if ptype is reg.event_type or ptype is inspect.Parameter.empty:
                kwargs[pname] = event
            elif ptype in self._deps:
                kwargs[pname] = self._deps[ptype]
            else:
                return Error(DispatchErrors.missing_dependency(pname, ptype))
        return Ok(kwargs)

    def dispatch(self, event: Event[T]) -> Result[T, DispatchError]:
        event_type = type(event)
        reg = self._registry.get(event_type)
        if reg is None:
            logger.debug("no handler for %s", event_type.__name__)
            return Error(DispatchErrors.not_registered(event_type))

        match self._arguments(reg, event):
            case Ok(kwargs):
                value = cast(T, reg.handler(**kwargs))
            case Error(e):
                logger.debug("dispatch of %s failed: %s", event_type.__name__, e.message)
                return Error(e)

        logger.debug("dispatched %s", event_type.__name__)
        for listener in tuple(self._listeners.get(event_type, ())):
            listener(value)
        return Ok(value)

    def __call__(self, event: Event[T]) -> Result[T, DispatchError]:
        return self.dispatch(event)


def notifier() -> NotifierBuilder:
    """Create notifier builder: notifier().on(...).compile()"""
    return NotifierBuilder()


__all__ = (
    "Event",
    "Listener",
    "DispatchError",
    "DispatchErrors",
    "NotifierBuilder",
    "Notifier",
    "notifier",
)
