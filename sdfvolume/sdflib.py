"""Signed distance functions for a handful of primitive and procedural shapes.

Every function accepts scalars or NumPy arrays of matching shape and works
element-wise, so a whole grid of sample points can be evaluated in one call.
"""

from __future__ import annotations

import numpy as np

__all__ = [
    "sphere_sdf",
    "box_sdf",
    "round_box_sdf",
    "box_frame_sdf",
    "torus_sdf",
    "capped_torus_sdf",
    "link_sdf",
    "cylinder_sdf",
    "repeating_shape_sdf",
    "rot",
    "pmod",
    "repeating_transform_sdf",
]


def _box_distance(qx, qy, qz):
    """Exact distance term shared by the box-like shapes."""
    outside = np.sqrt(
        np.maximum(qx, 0.0) ** 2 + np.maximum(qy, 0.0) ** 2 + np.maximum(qz, 0.0) ** 2
    )
    inside = np.minimum(np.maximum(np.maximum(qx, qy), qz), 0.0)
    return outside + inside


def sphere_sdf(x, y, z):
    """Squared-radius sphere field centred on the origin."""
    return x * x + y * y + z * z - 0.5


def box_sdf(x, y, z):
    """Exact distance to a box with half extents 0.5."""
    half = 0.5
    return _box_distance(np.abs(x) - half, np.abs(y) - half, np.abs(z) - half)


def round_box_sdf(x, y, z):
    """Exact distance to a box with half extents 0.5 and corner radius 0.1."""
    half, radius = 0.5, 0.1
    qx = np.abs(x) - half + radius
    qy = np.abs(y) - half + radius
    qz = np.abs(z) - half + radius
    return _box_distance(qx, qy, qz) - radius


def box_frame_sdf(x, y, z):
    """Exact distance to the edges of a box with half extents 0.5, thickness 0.1."""
    half, edge = 0.5, 0.1
    x = np.abs(x) - half
    y = np.abs(y) - half
    z = np.abs(z) - half
    qx = np.abs(x + edge) - edge
    qy = np.abs(y + edge) - edge
    qz = np.abs(z + edge) - edge
    s1 = _box_distance(x, qy, qz)
    s2 = _box_distance(qx, y, qz)
    s3 = _box_distance(qx, qy, z)
    return np.minimum(np.minimum(s1, s2), s3)


def torus_sdf(x, y, z):
    """Exact distance to a torus in the xz plane (radii 0.5 and 0.2)."""
    major, minor = 0.5, 0.2
    qx = np.sqrt(x * x + z * z) - major
    return np.sqrt(qx * qx + y * y) - minor


def capped_torus_sdf(x, y, z):
    """Exact distance to a capped torus."""
    sc_x, sc_y, ra, rb = 1.0, 0.5, 0.5, 0.1
    x = np.abs(x)
    k = np.where(
        sc_y * x > sc_x * y,
        (sc_x * x + sc_y * y) / (sc_x * sc_x + sc_y * sc_y),
        np.sqrt(x * x + y * y),
    )
    return np.sqrt(x * x + y * y + z * z + ra * ra - 2.0 * ra * k) - rb


def link_sdf(x, y, z):
    """Exact distance to a chain link."""
    length, r1, r2 = 0.5, 0.3, 0.1
    y = np.maximum(np.abs(y) - length, 0.0)
    qx = np.sqrt(x * x + y * y) - r1
    return np.sqrt(qx * qx + z * z) - r2


def cylinder_sdf(x, y, z):
    """Exact distance to an infinite cylinder along the y axis (radius 0.5)."""
    cx, cz, radius = 0.0, 0.0, 0.5
    return np.sqrt((x - cx) ** 2 + (z - cz) ** 2) - radius


def repeating_shape_sdf(x, y, z):
    """Folded, space-repeating procedural shape."""
    time = 3.0
    px = np.mod(x - 4.0, 8.0) - 4.0
    py = np.mod(y, 8.0) - 4.0
    pz = np.mod(z + time * 3.0, 8.0) - 4.0
    offset_y = np.sin(time * 2.0) * 0.3 + 0.1
    for _ in range(3):
        px, py, pz = np.abs(px) - 0.2, np.abs(py) - offset_y, np.abs(pz) - 0.2
    h = 0.5
    cx = py * h - pz * h
    cy = pz * h - px * h
    cz = px * h - py * h
    return np.sqrt(cx * cx + cy * cy + cz * cz) - 1.7


def rot(angle):
    """2x2 rotation matrix, applied as ``rot(angle) @ v``."""
    c = np.cos(angle)
    s = np.sin(angle)
    return np.array([[c, s], [-s, c]])


def pmod(p, size):
    """Wrap 2D coordinates into the cell ``[-size/2, size/2)``."""
    return np.mod(np.asarray(p, dtype=float) + size * 0.5, size) - size * 0.5


def repeating_transform_sdf(x, y, z):
    """Rotated, recursively folded plane structure."""
    time = 3.0
    m = rot(time * 0.3)
    px = m[0, 0] * x + m[0, 1] * y
    py = m[1, 0] * x + m[1, 1] * y
    pz = z

    def fold(px, py, pz):
        px, py = pmod((px, py), 10.0)
        py = py - 2.0
        py, pz = pmod((py, pz), 12.0)
        pz = pz - 10.0
        return px, py, pz

    px, py, pz = fold(px, py, pz)
    for _ in range(4):
        px, py, pz = fold(px, py, pz)

    norm = np.sqrt(13.0**2 + 1.0**2 + 7.0**2)
    return (np.abs(px) * 13.0 + np.abs(py) * 1.0 + np.abs(pz) * 7.0) / norm - 7.0