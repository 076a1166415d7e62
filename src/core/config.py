"""
Render settings and their JSON loader/saver.
A missing or unreadable file falls back to the defaults.
"""
import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Tuple

from core.logger import get_logger

logger = get_logger("config")

TONE_MAPPING_MODES = ("clamp", "reinhard")

@dataclass
class Settings:
    width: int = 320
    height: int = 180
    fov: float = 60.0  # Vertical field of view in degrees
    camera_position: Tuple[float, float, float] = (0.0, 1.0, 5.0)
    camera_yaw: float = 0.0
    camera_pitch: float = 0.0
    background: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    tone_mapping: str = "clamp"
    output: str = "render.png"
    extra: dict = field(default_factory=dict, repr=False)

    def __post_init__(self):
        try:
            self.width = int(self.width)
            self.height = int(self.height)
            self.fov = float(self.fov)
            self.camera_yaw = float(self.camera_yaw)
            self.camera_pitch = float(self.camera_pitch)
            self.camera_position = tuple(float(c) for c in self.camera_position)
            self.background = tuple(float(c) for c in self.background)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Malformed setting value: {exc}") from exc
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {self.fov}")
        if self.tone_mapping not in TONE_MAPPING_MODES:
            raise ValueError(f"Unknown tone mapping '{self.tone_mapping}', "
                             f"expected one of {TONE_MAPPING_MODES}")
        if len(self.camera_position) != 3 or len(self.background) != 3:
            raise ValueError("camera_position and background need exactly three components")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        known = {f.name for f in fields(cls) if f.name != "extra"}
        unknown = {k: v for k, v in data.items() if k not in known}
        for key in unknown:
            logger.warning(f"[Config] Ignoring unknown setting '{key}'")
        return cls(**{k: v for k, v in data.items() if k in known}, extra=unknown)

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("extra")
        data["camera_position"] = list(self.camera_position)
        data["background"] = list(self.background)
        return data

    def save(self, path) -> None:
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=4)
        logger.info(f"[Config] Settings saved to {path}")


def load_settings(path) -> Settings:
    """
    Read settings from a JSON file. Missing files and files that cannot be
    parsed yield the defaults; invalid values still raise ValueError.
    """
    path = Path(path)
    if not path.is_file():
        logger.info(f"[Config] No config file at {path} - using defaults.")
        return Settings()
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error(f"[Config] Failed to read config {path}: {exc}")
        return Settings()
    if not isinstance(data, dict):
        logger.error(f"[Config] Expected a JSON object in {path}, got {type(data).__name__}")
        return Settings()
    logger.info(f"[Config] Loaded configuration from {path}.")
    return Settings.from_dict(data)
