"""Tests for commentfold.config."""

from __future__ import annotations

import pytest

from commentfold.config import OutputMode, RunConfig
from commentfold.errors import ConfigError


def test_run_config_defaults_to_inplace() -> None:
    config = RunConfig()
    assert config.mode is OutputMode.INPLACE
    assert config.dry_run is False


def test_dry_run_forces_diff_mode() -> None:
    config = RunConfig.from_options("print", dry_run=True)
    assert config.output is OutputMode.PRINT
    assert config.mode is OutputMode.DIFF


def test_from_options_normalises_mode_names() -> None:
    assert RunConfig.from_options(" Diff ").mode is OutputMode.DIFF
    assert RunConfig.from_options(OutputMode.PRINT).mode is OutputMode.PRINT


def test_from_options_rejects_unknown_mode() -> None:
    with pytest.raises(ConfigError, match="Unknown output mode 'yaml'"):
        RunConfig.from_options("yaml")
