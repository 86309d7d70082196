"""Hook system base: names, handlers and the short-circuit rule."""

from __future__ import annotations

import inspect
from typing import Any, Callable

HookName = str

# Handlers take whatever arguments the caller passes to run_hook and return
# either a value or an awaitable resolving to one.
Handler = Callable[..., Any]


def stops_chain(value: Any) -> bool:
    """Return True if a handler result ends the chain.

    Only ``None`` lets dispatch continue. ``False``, ``0`` and empty
    containers are all stop values.
    """
    return value is not None


def _bound_parts(handler: Handler) -> tuple[Any, Any] | None:
    if inspect.ismethod(handler):
        return handler.__self__, handler.__func__
    # Built-in methods such as ``list.append`` have no __func__
    if inspect.isbuiltin(handler) and not inspect.ismodule(handler.__self__):
        return handler.__self__, handler.__name__
    return None


def same_handler(a: Handler, b: Handler) -> bool:
    """Identity comparison that also matches re-bound methods of one object."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    a_parts, b_parts = _bound_parts(a), _bound_parts(b)
    if a_parts is None or b_parts is None:
        return False
    return a_parts[0] is b_parts[0] and a_parts[1] == b_parts[1]
