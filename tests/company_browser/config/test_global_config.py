from __future__ import annotations

import json

import pytest

from company_browser.config.loader import DATA_PATH_ENV, load_global_config
from company_browser.core.exceptions import ConfigError


def _write_global(tmp_path, data):
    (tmp_path / "global.json").write_text(json.dumps(data), encoding="utf-8")


def test_load_global_config_with_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    _write_global(tmp_path, {})

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "Company Browser"
    assert cfg.page_size == 20
    assert cfg.max_visible_pages == 7
    assert cfg.data_path == (tmp_path / "../data/companies.json").resolve()


def test_relative_data_path_resolves_against_root(tmp_path, monkeypatch):
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    _write_global(tmp_path, {"ui_title": "AgriTech", "data_path": "data.json", "page_size": 10})

    cfg = load_global_config(tmp_path)

    assert cfg.ui_title == "AgriTech"
    assert cfg.page_size == 10
    assert cfg.data_path == (tmp_path / "data.json").resolve()


def test_env_var_overrides_data_path(tmp_path, monkeypatch):
    override = tmp_path / "elsewhere.json"
    monkeypatch.setenv(DATA_PATH_ENV, str(override))
    _write_global(tmp_path, {"data_path": "data.json"})

    assert load_global_config(tmp_path).data_path == override


def test_even_window_is_widened(tmp_path, monkeypatch):
    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    _write_global(tmp_path, {"max_visible_pages": 8})
    assert load_global_config(tmp_path).max_visible_pages == 9

    _write_global(tmp_path, {"max_visible_pages": 3})
    assert load_global_config(tmp_path).max_visible_pages == 5


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


@pytest.mark.parametrize("bad", [0, -3, "20", True])
def test_bad_page_size_raises_config_error(tmp_path, bad):
    _write_global(tmp_path, {"page_size": bad})
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)
