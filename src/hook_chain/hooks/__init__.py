"""Hook chains: registration and sequential dispatch."""

from hook_chain.hooks.abort import AbortError, run_hook_abortable
from hook_chain.hooks.base import Handler, HookName, stops_chain
from hook_chain.hooks.registry import HookRegistry

__all__ = [
    "AbortError",
    "Handler",
    "HookName",
    "HookRegistry",
    "run_hook_abortable",
    "stops_chain",
]
