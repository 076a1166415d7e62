# renderer/renderer.py
import math
import time
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from core.color import RGBColor
from core.config import Settings
from core.logger import get_logger
from core.vector import Vector3
from camera.camera import Camera
from tracer.tracer import Tracer
from .tone_mapping import TONE_MAPPERS

logger = get_logger("renderer")

class Renderer:
    """
    Casts one ray through the center of every pixel and stores the traced
    color, or the background color on a miss, in a float image buffer.
    """
    def __init__(self, settings: Settings, tracer: Tracer, camera: Optional[Camera] = None):
        self.settings = settings
        self.tracer = tracer
        self.camera = camera if camera is not None else camera_from_settings(settings)
        # Row 0 is the top of the image.
        self.image = np.zeros((settings.height, settings.width, 3), dtype=np.float32)
        self.hit_count = 0

    def background_color(self) -> RGBColor:
        """The world's background when the tracer has a world, else the settings'."""
        world = getattr(self.tracer, "world", None)
        if world is not None:
            return world.background_color
        return RGBColor.from_sequence(self.settings.background)

    def render(self) -> np.ndarray:
        width, height = self.settings.width, self.settings.height
        logger.info(f"Rendering {width}x{height} with {type(self.tracer).__name__}")
        start = time.perf_counter()

        background = self.background_color().to_tuple()
        hits = 0
        for y in range(height):
            v = (height - 1 - y + 0.5) / height
            for x in range(width):
                u = (x + 0.5) / width
                color = self.tracer.trace_ray(self.camera.get_ray(u, v))
                if color is None:
                    self.image[y, x] = background
                else:
                    self.image[y, x] = color.to_tuple()
                    hits += 1

        self.hit_count = hits
        elapsed = time.perf_counter() - start
        logger.info(f"Rendered {width * height} pixels ({hits} hits) in {elapsed:.2f}s")
        return self.image

    def to_image(self) -> Image.Image:
        tone_map = TONE_MAPPERS[self.settings.tone_mapping]
        return Image.fromarray(tone_map(self.image))

    def save(self, path=None) -> Path:
        path = Path(path if path is not None else self.settings.output)
        self.to_image().save(path)
        logger.info(f"Saved image to {path}")
        return path


def camera_from_settings(settings: Settings) -> Camera:
    return Camera(
        position=Vector3(*settings.camera_position),
        yaw=settings.camera_yaw,
        pitch=settings.camera_pitch,
        fov=math.radians(settings.fov),
        aspect_ratio=settings.aspect_ratio
    )
