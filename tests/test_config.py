"""Tests for persisted chart settings."""

from __future__ import annotations

import json

import pytest

from chart_geometry.config import CONFIG_ENV, ChartSettings, config_path, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path) -> None:
    """No settings file means default settings."""

    assert load_settings(tmp_path / "absent.json") == ChartSettings()


def test_round_trip(tmp_path) -> None:
    """Saved settings load back unchanged."""

    path = tmp_path / "settings.json"
    settings = ChartSettings(curved=True, fill=True, value_format="%.3f", curve_steps=250)
    assert save_settings(settings, path) == path
    assert load_settings(path) == settings


def test_partial_and_unknown_keys(tmp_path) -> None:
    """Missing keys keep defaults and unknown keys are ignored."""

    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"curved": True, "colour": "teal"}), encoding="utf-8")
    loaded = load_settings(path)
    assert loaded.curved is True
    assert loaded.fill is False
    assert loaded.curve_steps == ChartSettings().curve_steps


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"curve_steps": 0}),
        json.dumps({"value_format": "plain"}),
        json.dumps({"value_format": 5}),
        json.dumps({"value_format": True}),
        json.dumps({"magnifier_width": 0}),
        json.dumps({"magnifier_width": "wide"}),
        json.dumps({"style": "neon"}),
        json.dumps({"style": ["line_chart_style_one"]}),
    ],
)
def test_bad_files_fall_back_to_defaults(tmp_path, content) -> None:
    """Corrupt or invalid settings do not block usage."""

    path = tmp_path / "settings.json"
    path.write_text(content, encoding="utf-8")
    assert load_settings(path) == ChartSettings()


def test_env_var_overrides_location(tmp_path, monkeypatch) -> None:
    """The environment variable points at another settings file."""

    target = tmp_path / "custom.json"
    monkeypatch.setenv(CONFIG_ENV, str(target))
    assert config_path() == target
    save_settings(ChartSettings(legend_steps=8))
    assert load_settings().legend_steps == 8


def test_invalid_values_raise() -> None:
    """Constructing settings with impossible values fails."""

    with pytest.raises(ValueError):
        ChartSettings(curve_steps=0)
    with pytest.raises(ValueError):
        ChartSettings(legend_steps=0)
    with pytest.raises(ValueError):
        ChartSettings(value_format=5)
    with pytest.raises(ValueError):
        ChartSettings(magnifier_width=-10)
    with pytest.raises(ValueError):
        ChartSettings(style="neon")
