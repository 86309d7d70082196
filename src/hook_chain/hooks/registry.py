"""Hook registry for managing and dispatching hook chains."""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from typing import Any, Callable

from hook_chain.config.hooks import HookConfig
from hook_chain.hooks.base import Handler, HookName, same_handler, stops_chain

logger = logging.getLogger(__name__)


class HookRegistry:
    """Registry that stores hook chains by name and runs them in order.

    Handlers run one at a time in registration order. The first handler
    returning something other than ``None`` ends the chain and its value
    becomes the result. A failing handler ends the chain and its exception
    propagates unchanged.

    Usage::

        hooks = HookRegistry()

        async def load_user(ctx):
            ctx.user = await fetch_user(ctx)

        def deny_anonymous(ctx):
            if ctx.user is None:
                return False

        hooks.add_hook("request", load_user)
        hooks.add_hook("request", deny_anonymous)
        allowed = await hooks.run_hook("request", ctx)
    """

    def __init__(self, config: HookConfig | None = None) -> None:
        self.config = config or HookConfig()
        self._hooks: dict[HookName, list[Handler]] = {}
        self._lock = threading.Lock()

    def add_hook(self, name: HookName, handler: Handler) -> None:
        with self._lock:
            self._hooks.setdefault(name, []).append(handler)

    def remove_hook(self, name: HookName, handler: Handler | None = None) -> None:
        """Remove every occurrence of ``handler``, or the whole chain if omitted."""
        with self._lock:
            if handler is None:
                self._hooks.pop(name, None)
                return

            hooks = self._hooks.get(name)
            if hooks is None:
                return
            self._hooks[name] = [h for h in hooks if not same_handler(h, handler)]

    def hook(self, name: HookName) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`add_hook`."""

        def decorator(handler: Handler) -> Handler:
            self.add_hook(name, handler)
            return handler

        return decorator

    def get_hooks(self, name: HookName) -> list[Handler]:
        with self._lock:
            return list(self._hooks.get(name, []))

    def has_hooks(self, name: HookName) -> bool:
        with self._lock:
            return bool(self._hooks.get(name))

    def hook_names(self) -> list[HookName]:
        with self._lock:
            return list(self._hooks)

    async def run_hook(self, name: HookName, *args: Any) -> Any:
        """Run the chain for ``name`` with ``args``.

        Returns ``None`` when nothing is registered or every handler
        returned ``None``; otherwise the first non-``None`` result.
        """
        chain = self.get_hooks(name)
        if not chain:
            return None

        for index, handler in enumerate(chain):
            if self.config.log_dispatch:
                logger.debug("Hook %s: running handler %d/%d %r", name, index + 1, len(chain), handler)

            try:
                result = handler(*args)
                if inspect.isawaitable(result):
                    result = await result
                elif self.config.yield_to_loop:
                    await asyncio.sleep(0)
            except Exception:
                logger.debug("Hook %s: handler %d failed, aborting chain", name, index + 1)
                raise

            if stops_chain(result):
                logger.debug(
                    "Hook %s: handler %d returned %s, stopping chain",
                    name,
                    index + 1,
                    type(result).__name__,
                )
                return result

        return None

    def clear(self) -> None:
        with self._lock:
            self._hooks.clear()
