from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

logger = logging.getLogger(__name__)

MODEL_SCALE = 0.25

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "content" / "config.yaml"


def scaled(value: float) -> float:
    return value * MODEL_SCALE


@dataclass
class LeyConfig:
    max_distance: float = 150.0
    radius_tolerance: float = 0.45
    angle_tolerance: float = 0.7  # radians
    center_radius: float = 32.0 * MODEL_SCALE  # pentagram area of effect


@dataclass
class GameConfig:
    view_width: int = 960
    view_height: int = 540
    hud_height: float = 48.0
    fps: int = 60
    flag_interact_radius: float = 48.0 * MODEL_SCALE
    flag_pole_height: float = 36.0 * MODEL_SCALE
    flag_pole_width: float = 3.0 * MODEL_SCALE
    flag_cloth_size: Tuple[float, float] = (22.0 * MODEL_SCALE, 14.0 * MODEL_SCALE)
    flag_place_offset: Tuple[float, float] = (28.0 * MODEL_SCALE, 0.0)
    flag_spawn_padding: float = 40.0
    flag_count_start: int = 10
    starting_flag_inventory: int = 10
    ley: LeyConfig = field(default_factory=LeyConfig)


def _apply_section(target: Any, section: Any, name: str) -> None:
    if section is None:
        return
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    known = {f.name: f for f in fields(target) if f.name != "ley"}
    for key, value in section.items():
        if key not in known:
            logger.debug(f"Ignoring unknown config key {name}.{key}")
            continue
        current = getattr(target, key)
        try:
            if isinstance(current, tuple):
                value = tuple(float(v) for v in value)
                if len(value) != len(current):
                    raise ValueError(f"expected {len(current)} values")
            elif isinstance(current, bool):
                value = bool(value)
            elif isinstance(current, int):
                value = int(value)
            elif isinstance(current, float):
                value = float(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for {name}.{key}: {value!r} ({e})") from e
        setattr(target, key, value)


def validate_config(cfg: GameConfig) -> None:
    ley = cfg.ley
    if ley.max_distance <= 0:
        raise ValueError(f"ley.max_distance must be positive, got {ley.max_distance}")
    if ley.radius_tolerance < 0 or ley.angle_tolerance < 0:
        raise ValueError("ley tolerances must not be negative")
    if ley.center_radius < 0:
        raise ValueError(f"ley.center_radius must not be negative, got {ley.center_radius}")
    if cfg.view_width <= 0 or cfg.view_height <= 0:
        raise ValueError(f"view size must be positive, got {cfg.view_width}x{cfg.view_height}")


def config_from_dict(data: Dict[str, Any] | None) -> GameConfig:
    """Build a GameConfig from a parsed YAML document (``game`` and ``ley`` sections)."""
    cfg = GameConfig()
    if data is None:
        return cfg
    if not isinstance(data, dict):
        raise ValueError(f"Config document must be a mapping, got {type(data).__name__}")
    _apply_section(cfg, data.get("game"), "game")
    _apply_section(cfg.ley, data.get("ley"), "ley")
    validate_config(cfg)
    return cfg


def load_config(path: Path | str | None = None) -> GameConfig:
    """Load game + ley settings from YAML; falls back to the packaged defaults."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Config file malformed: {path}") from e
    cfg = config_from_dict(data)
    logger.info(f"Loaded config from {path} (ley max_distance={cfg.ley.max_distance})")
    return cfg
