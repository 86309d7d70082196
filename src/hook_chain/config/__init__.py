"""Configuration management."""

from hook_chain.config.hooks import HookConfig
from hook_chain.config.settings import Settings

__all__ = ["HookConfig", "Settings"]
