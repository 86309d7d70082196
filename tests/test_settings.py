"""Tests for hook-chain configuration."""

from __future__ import annotations

import pydantic
import pytest

from hook_chain.config import HookConfig, Settings
from hook_chain.hooks.registry import HookRegistry


class TestHookConfig:
    def test_defaults(self):
        config = HookConfig()
        assert config.yield_to_loop is True
        assert config.log_dispatch is False

    def test_unknown_key_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            HookConfig(yield_to_lop=False)


class TestSettings:
    def test_load_missing_file_gives_defaults(self, tmp_path):
        settings = Settings.load(tmp_path / "missing.toml")

        assert settings.hooks == HookConfig()

    def test_load_hooks_section(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            "working_directory = '/srv/app'\n"
            "[hooks]\n"
            "yield_to_loop = false\n"
            "log_dispatch = true\n"
        )

        settings = Settings.load(path)

        assert settings.hooks.yield_to_loop is False
        assert settings.hooks.log_dispatch is True
        assert settings.working_directory == "/srv/app"

    def test_load_default_path(self, tmp_path, monkeypatch):
        config_dir = tmp_path / ".hook-chain"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[hooks]\nlog_dispatch = true\n")
        monkeypatch.chdir(tmp_path)

        settings = Settings.load()

        assert settings.hooks.log_dispatch is True
        assert settings.config_path.resolve() == (config_dir / "config.toml").resolve()

    def test_config_path_reports_loaded_file(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text("[hooks]\nyield_to_loop = false\n")

        settings = Settings.load(path)

        assert settings.config_path == path
        assert settings.loaded_from == path

    def test_config_path_defaults_without_load(self, tmp_path):
        settings = Settings(working_directory=str(tmp_path))

        assert settings.loaded_from is None
        assert settings.config_path == tmp_path / ".hook-chain" / "config.toml"

    def test_invalid_hooks_section(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[hooks]\nunknown = 1\n")

        with pytest.raises(pydantic.ValidationError):
            Settings.load(path)

    async def test_create_registry(self, log):
        settings = Settings(hooks=HookConfig(log_dispatch=True))
        registry = settings.create_registry()

        assert isinstance(registry, HookRegistry)
        assert registry.config.log_dispatch is True

        registry.add_hook("foo", lambda: log.append("ran"))
        assert await registry.run_hook("foo") is None
        assert log == ["ran"]
