"""Tests for configuration and initialization."""

from __future__ import annotations

import pytest
from rustype import CopyMode, RustypeConfig, get_config, init
from rustype._config import COPY_MODE_ENV, _detect_copy_mode, reset


class TestCopyModeEnum:
    """Tests for the CopyMode enum."""

    def test_values(self) -> None:
        assert CopyMode.DEEP.value == 'deep'
        assert CopyMode.SHALLOW.value == 'shallow'
        assert CopyMode.NONE.value == 'none'

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            CopyMode('sideways')


class TestRustypeConfig:
    """Tests for the RustypeConfig dataclass."""

    def test_default_values(self) -> None:
        config = RustypeConfig()
        assert config.copy_mode == CopyMode.DEEP
        assert config.log_level is None

    def test_config_is_frozen(self) -> None:
        config = RustypeConfig()
        with pytest.raises(AttributeError):
            config.copy_mode = CopyMode.NONE  # type: ignore[misc]


class TestDetectCopyMode:
    """Tests for _detect_copy_mode()."""

    def test_default_is_deep(self) -> None:
        assert _detect_copy_mode() == CopyMode.DEEP

    def test_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(COPY_MODE_ENV, 'shallow')
        assert _detect_copy_mode() == CopyMode.SHALLOW

    def test_env_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(COPY_MODE_ENV, ' NONE ')
        assert _detect_copy_mode() == CopyMode.NONE

    def test_unknown_env_value_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(COPY_MODE_ENV, 'bogus')
        assert _detect_copy_mode() == CopyMode.DEEP


class TestInit:
    """Tests for init(), get_config() and reset()."""

    def test_init_with_enum(self) -> None:
        config = init(copy_mode=CopyMode.SHALLOW)
        assert config.copy_mode == CopyMode.SHALLOW
        assert get_config() is config

    def test_init_with_string(self) -> None:
        assert init(copy_mode='None').copy_mode == CopyMode.NONE

    def test_init_with_bad_string_raises(self) -> None:
        with pytest.raises(ValueError):
            init(copy_mode='sideways')

    def test_get_config_reads_environment_lazily(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(COPY_MODE_ENV, 'none')
        assert get_config().copy_mode == CopyMode.NONE

    def test_reset_forgets_config(self) -> None:
        init(copy_mode=CopyMode.NONE)
        reset()
        assert get_config().copy_mode == CopyMode.DEEP

    def test_init_with_log_level(self) -> None:
        config = init(log_level='DEBUG')
        assert config.log_level == 'DEBUG'
