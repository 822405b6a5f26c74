from __future__ import annotations

import logging
from pathlib import Path

import pytest

from uw.config import load_config, load_config_model, user_config_path
from uw.errors import UsageError
from uw.schema import UwConfig


def test_defaults_without_files(isolated_home: Path) -> None:
    config = load_config_model()

    assert config == UwConfig.from_dict({})
    assert config.general.profile_path == isolated_home / ".bashrc"
    assert config.update.package == "uw"
    assert config.update.resolved_index_url == "https://pypi.org/pypi/uw/json"
    assert config.logging.level == logging.WARNING
    assert config.logging.log_dir is None


def test_user_config_is_loaded(isolated_home: Path) -> None:
    path = user_config_path()
    path.parent.mkdir(parents=True)
    path.write_text(
        "[update]\npackage = \"uw-tools\"\ntimeout = 5\n\n[logging]\nlevel = \"debug\"\n",
        encoding="utf-8",
    )

    config = load_config_model()

    assert config.update.package == "uw-tools"
    assert config.update.timeout == 5.0
    assert config.logging.level == logging.DEBUG


def test_explicit_config_overrides_user_config(tmp_path: Path, monkeypatch) -> None:
    path = user_config_path()
    path.parent.mkdir(parents=True)
    path.write_text("[update]\npackage = \"a\"\ntimeout = 7\n", encoding="utf-8")
    explicit = tmp_path / "custom.toml"
    explicit.write_text("[update]\npackage = \"b\"\n", encoding="utf-8")
    monkeypatch.setenv("UW_CONFIG_PATH", str(explicit))

    data = load_config()

    assert data["update"] == {"package": "b", "timeout": 7}


def test_environment_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("UW_PROFILE", str(tmp_path / "profile"))
    monkeypatch.setenv("UW_LOG_LEVEL", "INFO")

    config = load_config_model()

    assert config.general.profile_path == (tmp_path / "profile").resolve()
    assert config.logging.level == logging.INFO


def test_invalid_values_fall_back_to_defaults(tmp_path: Path) -> None:
    explicit = tmp_path / "custom.toml"
    explicit.write_text(
        "general = \"oops\"\n[update]\ntimeout = -1\n[logging]\nlevel = \"LOUD\"\n",
        encoding="utf-8",
    )

    config = load_config_model(config_path=explicit, merge_user=False)

    assert config.update.timeout == 30.0
    assert config.logging.level == logging.WARNING


def test_malformed_config_is_a_usage_error(tmp_path: Path) -> None:
    explicit = tmp_path / "broken.toml"
    explicit.write_text("[update\n", encoding="utf-8")

    with pytest.raises(UsageError, match="invalid config file"):
        load_config_model(config_path=explicit, merge_user=False)
