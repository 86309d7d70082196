"""Cancellation wrapper racing a hook dispatch against a signal or deadline."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from hook_chain.hooks.base import HookName

if TYPE_CHECKING:
    from hook_chain.hooks.registry import HookRegistry

logger = logging.getLogger(__name__)


class AbortError(Exception):
    """Raised when a dispatch is aborted through its signal."""

    def __init__(self, message: str = "Aborted") -> None:
        super().__init__(message)


async def run_hook_abortable(
    registry: "HookRegistry",
    name: HookName,
    *args: Any,
    signal: asyncio.Event | None = None,
    timeout: float | None = None,
) -> Any:
    """Run ``registry.run_hook(name, *args)`` unless aborted first.

    If ``signal`` is set, or ``timeout`` seconds pass, before the chain
    settles, the dispatch task is cancelled and awaited, then
    :class:`AbortError` or :class:`TimeoutError` is raised.
    """
    if signal is not None and signal.is_set():
        raise AbortError()

    run_task = asyncio.ensure_future(registry.run_hook(name, *args))
    waiters: set[asyncio.Future] = {run_task}
    abort_task = None
    if signal is not None:
        abort_task = asyncio.ensure_future(signal.wait())
        waiters.add(abort_task)

    try:
        done, _ = await asyncio.wait(waiters, timeout=timeout, return_when=asyncio.FIRST_COMPLETED)
    finally:
        if abort_task is not None:
            abort_task.cancel()
        if not run_task.done():
            run_task.cancel()
            # Let the cancelled chain unwind before reporting, including
            # when the caller itself was cancelled.
            await asyncio.wait({run_task})

    if run_task in done:
        return run_task.result()

    if abort_task is not None and abort_task in done:
        logger.debug("Hook %s: dispatch aborted by signal", name)
        raise AbortError()

    logger.debug("Hook %s: dispatch timed out after %ss", name, timeout)
    raise TimeoutError(f"Hook {name!r} did not settle within {timeout}s")
