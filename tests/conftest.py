"""Shared test fixtures for the hook-chain test suite."""

from __future__ import annotations

import asyncio

import pytest

from hook_chain.config import HookConfig
from hook_chain.hooks.registry import HookRegistry


# ---------------------------------------------------------------------------
# Handler helpers
# ---------------------------------------------------------------------------


def make_async_marker(log: list[str], label: str, delay: float = 0.01):
    """Async handler that records start/end markers around a delay."""

    async def handler(*args):
        log.append(f"start{label}")
        await asyncio.sleep(delay)
        log.append(f"end{label}")

    return handler


def make_sync_marker(log: list[str], label: str, result=None):
    """Sync handler that records a marker and returns ``result``."""

    def handler(*args):
        log.append(label)
        return result

    return handler


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hook_registry():
    return HookRegistry()


@pytest.fixture
def eager_registry():
    """Registry that does not yield to the loop after sync handlers."""
    return HookRegistry(HookConfig(yield_to_loop=False))


@pytest.fixture
def log() -> list[str]:
    return []
