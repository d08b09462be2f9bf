from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .bezier import DEFAULT_STEPS
from .style import get_style

logger = logging.getLogger(__name__)

CONFIG_ENV = "CHART_GEOMETRY_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".chart_geometry.json"


@dataclass
class ChartSettings:
    curved: bool = False
    fill: bool = False
    value_format: str = "%.1f"
    curve_steps: int = DEFAULT_STEPS
    exact_points: bool = False
    legend_steps: int = 4
    magnifier_width: int = 60
    style: str = "line_chart_style_one"

    def __post_init__(self) -> None:
        if int(self.curve_steps) < 1:
            raise ValueError("curve_steps must be >= 1")
        if int(self.legend_steps) < 1:
            raise ValueError("legend_steps must be >= 1")
        if isinstance(self.magnifier_width, bool) or not isinstance(self.magnifier_width, int) or self.magnifier_width < 1:
            raise ValueError("magnifier_width must be a positive integer")
        if not isinstance(self.value_format, str):
            raise ValueError(f"value_format must be a string, got {self.value_format!r}")
        # Fail early on a format that cannot render a float.
        try:
            self.value_format % 0.0
        except (TypeError, ValueError) as e:
            raise ValueError(f"bad value_format {self.value_format!r}: {e}") from None
        if not isinstance(self.style, str):
            raise ValueError(f"style must be a preset name, got {self.style!r}")
        get_style(self.style)


def config_path() -> Path:
    env = os.environ.get(CONFIG_ENV, "").strip()
    return Path(env).expanduser() if env else DEFAULT_CONFIG_PATH


def load_settings(path: Optional[Path] = None) -> ChartSettings:
    """
    Read settings, keeping defaults for anything missing.

    Unknown keys are ignored; an unreadable or invalid file gives the defaults.
    """
    path = path or config_path()
    if not path.exists():
        return ChartSettings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("settings file must contain a JSON object")
        known = {f.name for f in fields(ChartSettings)}
        merged = {**asdict(ChartSettings()), **{k: v for k, v in data.items() if k in known}}
        return ChartSettings(**merged)
    except (OSError, ValueError, TypeError) as e:
        logger.warning("ignoring settings file %s: %s", path, e)
        return ChartSettings()


def save_settings(settings: ChartSettings, path: Optional[Path] = None) -> Path:
    path = path or config_path()
    path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")
    return path
