import numpy as np
import pytest

from sdfvolume import sdflib


def test_sphere_at_origin():
    assert sdflib.sphere_sdf(0.0, 0.0, 0.0) == pytest.approx(-0.5)


def test_sphere_grows_outward():
    assert sdflib.sphere_sdf(0.1, 0.0, 0.0) < sdflib.sphere_sdf(0.5, 0.0, 0.0)
    assert sdflib.sphere_sdf(1.0, 1.0, 1.0) > 0


def test_box_surface_is_zero():
    assert sdflib.box_sdf(0.5, 0.0, 0.0) == pytest.approx(0.0)
    assert sdflib.box_sdf(0.0, 0.0, 0.0) < 0
    assert sdflib.box_sdf(2.0, 0.0, 0.0) > 0


def test_box_distance_grows_linearly_outside():
    d1 = sdflib.box_sdf(1.0, 0.0, 0.0)
    d2 = sdflib.box_sdf(1.5, 0.0, 0.0)
    assert d2 - d1 == pytest.approx(0.5)


@pytest.mark.parametrize(
    "fn", [sdflib.box_sdf, sdflib.round_box_sdf, sdflib.box_frame_sdf, sdflib.torus_sdf]
)
@pytest.mark.parametrize("signs", [(-1, 1, 1), (1, -1, 1), (1, 1, -1), (-1, -1, -1)])
def test_mirror_symmetry(fn, signs):
    x, y, z = 0.3, 0.7, 0.2
    sx, sy, sz = signs
    assert fn(sx * x, sy * y, sz * z) == pytest.approx(fn(x, y, z))


def test_round_box_is_inside_box():
    for p in [(0.45, 0.45, 0.45), (0.5, 0.0, 0.0), (0.2, 0.49, 0.1)]:
        assert sdflib.round_box_sdf(*p) >= sdflib.box_sdf(*p) - 1e-9


def test_box_frame_corner_on_surface():
    assert sdflib.box_frame_sdf(0.5, 0.5, 0.5) == pytest.approx(0.0)
    assert sdflib.box_frame_sdf(0.0, 0.0, 0.0) > 0


def test_torus_on_ring():
    assert sdflib.torus_sdf(0.5, 0.0, 0.0) == pytest.approx(-0.2)


def test_torus_rotational_symmetry():
    assert sdflib.torus_sdf(0.3, 0.1, 0.4) == pytest.approx(sdflib.torus_sdf(0.5, 0.1, 0.0))


def test_capped_torus_mirror_in_x():
    for p in [(0.3, 0.2, 0.1), (0.1, 0.6, -0.2), (0.7, -0.3, 0.0)]:
        x, y, z = p
        assert sdflib.capped_torus_sdf(-x, y, z) == pytest.approx(sdflib.capped_torus_sdf(x, y, z))


def test_link_symmetry():
    assert sdflib.link_sdf(0.3, 0.8, 0.1) == pytest.approx(sdflib.link_sdf(-0.3, -0.8, -0.1))


def test_cylinder_independent_of_y():
    values = [sdflib.cylinder_sdf(0.2, y, 0.1) for y in (-5.0, 0.0, 3.0)]
    assert values[0] == pytest.approx(values[1])
    assert values[1] == pytest.approx(values[2])
    assert sdflib.cylinder_sdf(0.5, 9.0, 0.0) == pytest.approx(0.0)


@pytest.mark.parametrize(
    "fn",
    [
        sdflib.sphere_sdf,
        sdflib.box_sdf,
        sdflib.round_box_sdf,
        sdflib.box_frame_sdf,
        sdflib.torus_sdf,
        sdflib.capped_torus_sdf,
        sdflib.link_sdf,
        sdflib.cylinder_sdf,
        sdflib.repeating_shape_sdf,
        sdflib.repeating_transform_sdf,
    ],
)
def test_vectorised_matches_scalar(fn):
    rng = np.random.default_rng(7)
    pts = rng.uniform(-1.0, 1.0, size=(3, 20))
    vector = np.asarray(fn(pts[0], pts[1], pts[2]))
    assert vector.shape == (20,)
    for idx in range(20):
        assert vector[idx] == pytest.approx(float(fn(*pts[:, idx])))
    assert np.all(np.isfinite(vector))


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_repeating_shape_periodic(axis):
    p = [0.3, -0.7, 1.1]
    q = list(p)
    q[axis] += 8.0
    assert sdflib.repeating_shape_sdf(*q) == pytest.approx(sdflib.repeating_shape_sdf(*p), abs=1e-9)


def test_rot_zero_is_identity():
    np.testing.assert_allclose(sdflib.rot(0.0), np.eye(2))


@pytest.mark.parametrize("angle", [0.3, 1.2, -2.5])
def test_rot_is_orthogonal(angle):
    m = sdflib.rot(angle)
    np.testing.assert_allclose(m @ m.T, np.eye(2), atol=1e-12)
    v = np.array([3.0, -4.0])
    assert np.linalg.norm(m @ v) == pytest.approx(np.linalg.norm(v))


def test_pmod_range_and_period():
    p = np.array([13.7, -22.1])
    wrapped = sdflib.pmod(p, 10.0)
    assert np.all(wrapped >= -5.0)
    assert np.all(wrapped < 5.0)
    np.testing.assert_allclose(sdflib.pmod(p + 10.0, 10.0), wrapped, atol=1e-9)


def test_pmod_leaves_centre_cell_unchanged():
    np.testing.assert_allclose(sdflib.pmod((1.5, -2.0), 10.0), [1.5, -2.0])