# main.py
import argparse
import logging
import sys

from core.color import RGBColor
from core.config import Settings, TONE_MAPPING_MODES, load_settings
from core.logger import get_logger, init_logger
from core.vector import Vector3
from geometry.plane import Plane
from geometry.world import World
from renderer.renderer import Renderer
from tracer.multiple_objects import MultipleObjects

logger = get_logger("main")

class Application:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.world = self.create_world()
        self.tracer = MultipleObjects(self.world)
        self.renderer = Renderer(settings, self.tracer)

    def create_world(self) -> World:
        world = World(background_color=RGBColor.from_sequence(self.settings.background))
        logger.info("=== Creating World ===")
        logger.info(f"Camera position: {self.settings.camera_position}")

        floor = Plane(Vector3(0, 0, 0), Vector3(0, 1, 0))
        world.add(floor)
        logger.info("Added floor plane at y=0")

        back_wall = Plane(Vector3(0, 0, -10), Vector3(0, 0, 1))
        back_wall.set_color(RGBColor(0.2, 0.3, 0.8))
        world.add(back_wall)
        logger.info("Added back wall at z=-10")

        left_wall = Plane(Vector3(-4, 0, 0), Vector3(2, 0, 0))
        left_wall.set_color(RGBColor(0.8, 0.2, 0.2))
        world.add(left_wall)
        logger.info("Added left wall at x=-4")

        right_wall = Plane(Vector3(4, 0, 0), Vector3(-1, 0, 0))
        right_wall.set_color(RGBColor(0.2, 0.8, 0.2))
        world.add(right_wall)
        logger.info("Added right wall at x=4")

        # Material pass after the scene is assembled; the world holds the same
        # instance, so the new color is what gets rendered.
        floor.set_color(RGBColor(0.6, 0.6, 0.6))
        logger.debug(f"Floor recolored to {floor.color()}")

        logger.info(f"World contains {len(world)} objects")
        return world

    def run(self):
        self.renderer.render()
        return self.renderer.save()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a flat-shaded scene of planes.")
    parser.add_argument("--config", default="config.json", help="JSON settings file")
    parser.add_argument("--width", type=int, help="Image width")
    parser.add_argument("--height", type=int, help="Image height")
    parser.add_argument("--output", help="Output PNG path")
    parser.add_argument("--tone-mapping", choices=TONE_MAPPING_MODES, help="Tone mapping operator")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    data = load_settings(args.config).to_dict()
    overrides = {
        "width": args.width,
        "height": args.height,
        "output": args.output,
        "tone_mapping": args.tone_mapping,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.from_dict(data)


def main(argv=None) -> int:
    args = parse_args(argv)
    init_logger(logging.DEBUG if args.debug else logging.INFO)

    try:
        settings = build_settings(args)
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 2

    app = Application(settings)
    try:
        path = app.run()
    except OSError as e:
        logger.error(f"Could not write image: {e}")
        return 1
    logger.info(f"Done: {path}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
