"""Hook dispatch configuration schema using Pydantic v2."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class HookConfig(BaseModel):
    """Dispatch options for a HookRegistry."""

    model_config = ConfigDict(extra="forbid")

    # Yield to the event loop after each synchronous handler
    yield_to_loop: bool = True
    # One DEBUG record per handler invocation
    log_dispatch: bool = False
