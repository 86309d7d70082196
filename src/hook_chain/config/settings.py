"""Configuration loading from TOML."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from hook_chain.config.hooks import HookConfig

if TYPE_CHECKING:
    from hook_chain.hooks.registry import HookRegistry

DEFAULT_CONFIG_DIR = ".hook-chain"
DEFAULT_CONFIG_FILE = "config.toml"


@dataclass
class Settings:
    hooks: HookConfig = field(default_factory=HookConfig)
    working_directory: str = field(default_factory=lambda: os.getcwd())
    config_dir: str = DEFAULT_CONFIG_DIR
    loaded_from: Path | None = None

    @property
    def config_path(self) -> Path:
        """The file passed to :meth:`load`, else the default location."""
        if self.loaded_from is not None:
            return self.loaded_from
        return Path(self.working_directory) / self.config_dir / DEFAULT_CONFIG_FILE

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "Settings":
        if config_path is None:
            config_path = Path(os.getcwd()) / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE

        config_path = Path(config_path)
        raw: dict[str, Any] = {}

        if config_path.exists():
            with open(config_path, "rb") as f:
                raw = tomllib.load(f)

        settings = cls._from_dict(raw)
        settings.loaded_from = config_path
        return settings

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Settings":
        hooks = HookConfig(**data.get("hooks", {}))
        return cls(
            hooks=hooks,
            working_directory=data.get("working_directory", os.getcwd()),
        )

    def create_registry(self) -> "HookRegistry":
        from hook_chain.hooks.registry import HookRegistry

        return HookRegistry(self.hooks)
