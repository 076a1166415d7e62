import math
import pytest
from core.color import RGBColor, BLACK
from core.ray import Ray
from core.utils import EPSILON
from core.vector import Vector3, ZERO, UP
from geometry.geometric_object import GeometricObject
from geometry.plane import Plane

def test_new():
    p = Plane(ZERO, Vector3(1.0, 2.0, 3.0))
    assert p.normal().is_normalized()
    assert p.normal().length() == pytest.approx(1.0)
    assert p.point() == ZERO
    assert p.color() == BLACK
    assert isinstance(p, GeometricObject)

def test_unit_normal_kept_verbatim():
    n = Vector3(0.0, 0.0, 1.0)
    assert Plane(ZERO, n).normal() == n

def test_hit():
    plane1 = Plane(ZERO, Vector3(1.0, 1.0, 1.0))
    hit1, t1, s1 = plane1.hit(Ray(ZERO, UP))
    assert not hit1
    assert t1 is None
    assert s1 is None

    plane2 = Plane(ZERO, UP)
    c = RGBColor(0.1, 0.2, 0.3)
    plane2.set_color(c)

    ray2 = Ray(Vector3(0.0, -1.0, 0.0), Vector3(0.0, 2.0, 0.0))
    hit2, t2, s2 = plane2.hit(ray2)
    assert hit2
    assert t2 == 1.0
    assert s2 is not None
    assert s2.hit_an_object
    assert s2.local_hit_point == ZERO
    assert s2.normal == UP
    assert s2.color == c

def test_hit_from_the_back_side():
    plane = Plane(ZERO, UP)
    hit, t, record = plane.hit(Ray(Vector3(0, 3, 0), Vector3(0, -1, 0)))
    assert hit
    assert t == pytest.approx(3.0)
    assert record.normal == UP

@pytest.mark.parametrize("normal, origin, direction", [
    (UP, Vector3(0, 1, 0), Vector3(1, 0, 0)),
    (UP, Vector3(3, -2, 5), Vector3(1, 0, 1)),
    (UP, Vector3(0, 1, 0), Vector3(0, 0, -1)),
    (Vector3(1, 1, 1), Vector3(1, 1, 1), Vector3(1, -1, 0)),
])
def test_parallel_ray_never_hits(normal, origin, direction):
    plane = Plane(ZERO, normal)
    assert plane.hit(Ray(origin, direction)) == (False, None, None)

def test_parallel_ray_lying_in_plane_misses():
    plane = Plane(ZERO, UP)
    assert plane.hit(Ray(Vector3(1, 0, 1), Vector3(1, 0, 0))) == (False, None, None)

def test_intersection_behind_origin_misses():
    plane = Plane(ZERO, UP)
    assert plane.hit(Ray(Vector3(0, 1, 0), UP)) == (False, None, None)

def test_epsilon_threshold():
    plane = Plane(ZERO, UP)
    hit, _, _ = plane.hit(Ray(Vector3(0, -EPSILON / 2, 0), UP))
    assert not hit
    hit, t, _ = plane.hit(Ray(Vector3(0, -2 * EPSILON, 0), UP))
    assert hit
    assert t == pytest.approx(2 * EPSILON)

def test_distance_is_a_finite_float():
    plane = Plane(Vector3(0, 0, -4), Vector3(0, 0, 1))
    hit, t, record = plane.hit(Ray(ZERO, Vector3(0, 0, -1)))
    assert hit
    assert type(t) is float
    assert math.isfinite(t)
    assert record.local_hit_point == Vector3(0, 0, -4)

def test_color():
    p = Plane(ZERO, Vector3(1.0, 2.0, 3.0))
    c = RGBColor(0.1, 0.2, 0.3)
    p.set_color(c)
    assert p.color() == c

def test_color_change_visible_through_every_reference():
    plane = Plane(ZERO, UP)
    scene = [plane]
    alias = scene[0]
    alias.set_color(RGBColor(0.0, 1.0, 0.0))

    assert plane.color() == RGBColor(0.0, 1.0, 0.0)
    _, _, record = plane.hit(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)))
    assert record.color == RGBColor(0.0, 1.0, 0.0)

def test_existing_record_keeps_color_from_hit_time():
    plane = Plane(ZERO, UP)
    plane.set_color(RGBColor(1.0, 0.0, 0.0))
    _, _, record = plane.hit(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)))
    plane.set_color(RGBColor(0.0, 0.0, 1.0))
    assert record.color == RGBColor(1.0, 0.0, 0.0)
