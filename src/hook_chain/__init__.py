"""hook-chain: named, ordered async hook chains with short-circuit dispatch.

Usage:
    from hook_chain import HookRegistry

    hooks = HookRegistry()
    hooks.add_hook("request", check_auth)
    result = await hooks.run_hook("request", ctx)
"""

__version__ = "0.1.0"

from .hooks import AbortError, HookRegistry, run_hook_abortable
from .config import HookConfig, Settings

__all__ = ["AbortError", "HookConfig", "HookRegistry", "Settings", "run_hook_abortable"]
