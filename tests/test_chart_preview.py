"""Tests for the preview script."""

from __future__ import annotations

import argparse

import pytest
from PIL import Image

import chart_preview
from chart_geometry.config import CONFIG_ENV, ChartSettings, save_settings
from chart_geometry.errors import InsufficientSamplesError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's settings file out of the tests."""

    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "settings.json"))


def test_parse_sample_and_size() -> None:
    """Parse label=value pairs and WIDTHxHEIGHT."""

    assert chart_preview.parse_sample("Mon=3") == ("Mon", 3.0)
    assert chart_preview.parse_sample("-2.5") == ("", -2.5)
    assert chart_preview.parse_size("300x200") == (300.0, 200.0)


def test_main_writes_png(tmp_path, capsys) -> None:
    """Render labelled samples with a magnifier to a file."""

    out = tmp_path / "chart.png"
    rc = chart_preview.main(["Mon=3", "Tue=5", "Wed=2", "--curved", "--fill", "--touch-x", "50", "--out", str(out)])
    assert rc == 0
    assert out.exists()
    assert Image.open(out).size[0] > 0
    assert "Wrote" in capsys.readouterr().out


def test_main_rejects_a_single_sample(tmp_path) -> None:
    """One value cannot be drawn as a line."""

    with pytest.raises(InsufficientSamplesError):
        chart_preview.main(["3", "--out", str(tmp_path / "x.png")])


@pytest.mark.parametrize("arg", ["abc", "Mon=", "Mon=three"])
def test_bad_sample_is_a_usage_error(arg, tmp_path, capsys) -> None:
    """Unparseable samples exit through argparse instead of a traceback."""

    with pytest.raises(argparse.ArgumentTypeError):
        chart_preview.parse_sample(arg)
    with pytest.raises(SystemExit) as exc:
        chart_preview.main(["3", arg, "--out", str(tmp_path / "x.png")])
    assert exc.value.code == 2
    assert "LABEL=VALUE" in capsys.readouterr().err


def test_flags_can_switch_saved_options_off(tmp_path, monkeypatch) -> None:
    """--no-curved and --no-fill override a settings file that turns them on."""

    save_settings(ChartSettings(curved=True, fill=True))
    used = []

    def fake_render(series, size, *, settings, **kwargs):
        used.append(settings)
        return Image.new("RGB", (1, 1))

    monkeypatch.setattr(chart_preview, "render_line_chart", fake_render)
    out = str(tmp_path / "x.png")
    chart_preview.main(["3", "5", "--out", out])
    chart_preview.main(["3", "5", "--no-curved", "--no-fill", "--out", out])
    chart_preview.main(["3", "5", "--no-curved", "--fill", "--out", out])
    assert [(s.curved, s.fill) for s in used] == [(True, True), (False, False), (False, True)]
