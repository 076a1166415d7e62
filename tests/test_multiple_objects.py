import pytest
from core.color import RGBColor
from core.ray import Ray
from core.vector import Vector3, UP
from geometry.plane import Plane
from geometry.shade_record import ShadeRecordBuilder
from geometry.world import World
from tracer.multiple_objects import MultipleObjects
from tracer.tracer import Tracer

class StubWorld:
    def __init__(self, record):
        self.record = record

    def hit_objects(self, ray):
        return self.record

RAY = Ray(Vector3(0, 5, 0), Vector3(0, -1, 0))

def test_trace_ray_returns_nearest_color():
    world = World()
    floor = Plane(Vector3(0, 0, 0), UP)
    floor.set_color(RGBColor(0.1, 0.2, 0.3))
    world.add(floor)
    tracer = MultipleObjects(world)
    assert isinstance(tracer, Tracer)
    assert tracer.trace_ray(RAY) == RGBColor(0.1, 0.2, 0.3)

def test_trace_ray_miss_returns_none():
    tracer = MultipleObjects(World())
    assert tracer.trace_ray(RAY) is None

def test_record_without_hit_flag_returns_none():
    record = ShadeRecordBuilder().color(RGBColor(1, 0, 0)).finalize()
    assert MultipleObjects(StubWorld(record)).trace_ray(RAY) is None

def test_world_changes_are_seen_by_tracer():
    world = World()
    tracer = MultipleObjects(world)
    assert tracer.trace_ray(RAY) is None
    floor = Plane(Vector3(0, 0, 0), UP)
    world.add(floor)
    floor.set_color(RGBColor(0.5, 0.5, 0.5))
    assert tracer.trace_ray(RAY) == RGBColor(0.5, 0.5, 0.5)

def test_tracers_share_one_world():
    world = World()
    floor = Plane(Vector3(0, 0, 0), UP)
    world.add(floor)
    first, second = MultipleObjects(world), MultipleObjects(world)
    floor.set_color(RGBColor(0.0, 1.0, 0.0))
    assert first.trace_ray(RAY) == second.trace_ray(RAY) == RGBColor(0.0, 1.0, 0.0)

def test_base_tracer_is_abstract():
    with pytest.raises(NotImplementedError):
        Tracer().trace_ray(RAY)
