from .renderer import Renderer, camera_from_settings
from .tone_mapping import clamp_tone_mapping, reinhard_tone_mapping

__all__ = ["Renderer", "camera_from_settings", "clamp_tone_mapping", "reinhard_tone_mapping"]
