"""Procedural wireframe meshes for the Heartfield scene."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


@dataclass(frozen=True)
class WireframeMesh:
    """Simple container for line segments connecting vertex indices."""

    vertices: Sequence[Vec3]
    segments: Sequence[Tuple[int, int]]

    def transformed(
        self,
        offset: Vec3 = (0.0, 0.0, 0.0),
        scale: float = 1.0,
    ) -> "WireframeMesh":
        """Return a new mesh with vertices offset/scaled."""

        ox, oy, oz = offset
        transformed_vertices = [
            ((x * scale) + ox, (y * scale) + oy, (z * scale) + oz)
            for x, y, z in self.vertices
        ]
        return WireframeMesh(transformed_vertices, self.segments)

    def bounds(self) -> Tuple[Vec3, Vec3]:
        array = np.array(self.vertices, dtype=np.float32).reshape(-1, 3)
        if array.size == 0:
            return (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)
        low = array.min(axis=0)
        high = array.max(axis=0)
        return tuple(float(v) for v in low), tuple(float(v) for v in high)

    def centered(self) -> "WireframeMesh":
        low, high = self.bounds()
        center = tuple(-(lo + hi) * 0.5 for lo, hi in zip(low, high))
        return self.transformed(offset=center)

    def vertex_array(self) -> np.ndarray:
        return np.array(self.vertices, dtype=np.float32).reshape(-1, 3)

    def index_array(self) -> np.ndarray:
        return np.array(self.segments, dtype=np.uint32).reshape(-1)


def _loop_segments(vertex_count: int, start: int = 0) -> List[Tuple[int, int]]:
    return [(start + i, start + (i + 1) % vertex_count) for i in range(vertex_count)]


def extrude_outline(
    vertices_2d: Sequence[Vec2],
    segments_2d: Sequence[Tuple[int, int]],
    depth: float,
) -> WireframeMesh:
    """Turn a 2D silhouette in the XY plane into a prism along Z."""

    half = depth / 2.0
    front = [(x, y, half) for x, y in vertices_2d]
    back = [(x, y, -half) for x, y in vertices_2d]
    vertices = front + back
    vertex_count = len(vertices_2d)

    segments: List[Tuple[int, int]] = []
    seen = set()

    def add_segment(a: int, b: int) -> None:
        if a == b:
            return
        key = tuple(sorted((a, b)))
        if key in seen:
            return
        seen.add(key)
        segments.append((a, b))

    for a, b in segments_2d:
        add_segment(a, b)
        add_segment(a + vertex_count, b + vertex_count)
        add_segment(a, a + vertex_count)
        add_segment(b, b + vertex_count)

    return WireframeMesh(vertices, segments)


def create_box_mesh(size: float = 1.0) -> WireframeMesh:
    h = size / 2.0
    square = [(-h, -h), (h, -h), (h, h), (-h, h)]
    return extrude_outline(square, _loop_segments(4), depth=size)


def create_sphere_mesh(radius: float = 0.8, segments: int = 32) -> WireframeMesh:
    """Latitude rings plus meridians, like a globe."""

    if segments < 3:
        raise ValueError(f"segments must be >= 3, got {segments}")

    vertices: List[Vec3] = []
    lines: List[Tuple[int, int]] = []
    rings = max(2, segments // 2)

    # Latitude rings, poles excluded.
    for ring in range(1, rings):
        phi = math.pi * ring / rings
        y = math.cos(phi) * radius
        ring_radius = math.sin(phi) * radius
        start = len(vertices)
        for i in range(segments):
            theta = 2.0 * math.pi * i / segments
            vertices.append((math.cos(theta) * ring_radius, y, math.sin(theta) * ring_radius))
        lines.extend(_loop_segments(segments, start))

    top = len(vertices)
    vertices.append((0.0, radius, 0.0))
    bottom = len(vertices)
    vertices.append((0.0, -radius, 0.0))

    # Eight meridians keep the globe readable.
    stride = max(1, segments // 8)
    for i in range(0, segments, stride):
        column = [(ring - 1) * segments + i for ring in range(1, rings)]
        lines.append((top, column[0]))
        lines.extend(zip(column, column[1:]))
        lines.append((column[-1], bottom))

    return WireframeMesh(vertices, lines)


def create_torus_mesh(
    radius: float = 0.7,
    tube: float = 0.2,
    radial_segments: int = 16,
    tubular_segments: int = 100,
) -> WireframeMesh:
    if radial_segments < 3 or tubular_segments < 3:
        raise ValueError("torus needs at least 3 radial and 3 tubular segments")

    vertices: List[Vec3] = []
    lines: List[Tuple[int, int]] = []
    for j in range(tubular_segments):
        u = 2.0 * math.pi * j / tubular_segments
        for i in range(radial_segments):
            v = 2.0 * math.pi * i / radial_segments
            ring = radius + tube * math.cos(v)
            vertices.append((ring * math.cos(u), ring * math.sin(u), tube * math.sin(v)))

    for j in range(tubular_segments):
        start = j * radial_segments
        lines.extend(_loop_segments(radial_segments, start))
        next_start = ((j + 1) % tubular_segments) * radial_segments
        for i in range(radial_segments):
            lines.append((start + i, next_start + i))
    return WireframeMesh(vertices, lines)


def create_ground_mesh(size: float = 20.0, divisions: int = 20) -> WireframeMesh:
    """Square grid lying in the XZ plane."""

    if divisions < 1:
        raise ValueError(f"divisions must be >= 1, got {divisions}")
    half = size / 2.0
    step = size / divisions
    vertices: List[Vec3] = []
    lines: List[Tuple[int, int]] = []
    for i in range(divisions + 1):
        offset = -half + i * step
        start = len(vertices)
        vertices.extend(
            [(offset, 0.0, -half), (offset, 0.0, half), (-half, 0.0, offset), (half, 0.0, offset)]
        )
        lines.append((start, start + 1))
        lines.append((start + 2, start + 3))
    return WireframeMesh(vertices, lines)


def _cubic_bezier(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, steps: int) -> List[Vec2]:
    points: List[Vec2] = []
    for step in range(1, steps + 1):
        t = step / steps
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3.0 * mt * mt * t
        c = 3.0 * mt * t * t
        d = t * t * t
        points.append(
            (
                a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
                a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1],
            )
        )
    return points


def heart_outline(steps: int = 12) -> List[Vec2]:
    """Closed heart silhouette built from six cubic Bezier curves."""

    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")
    x, y = -2.5, -5.0
    start = (x + 2.5, y + 2.5)
    curves = [
        ((x + 2.5, y + 2.5), (x + 2.0, y), (x, y)),
        ((x - 3.0, y), (x - 3.0, y + 3.5), (x - 3.0, y + 3.5)),
        ((x - 3.0, y + 5.5), (x - 1.5, y + 7.7), (x + 2.5, y + 9.5)),
        ((x + 6.0, y + 7.7), (x + 8.0, y + 4.5), (x + 8.0, y + 3.5)),
        ((x + 8.0, y + 3.5), (x + 8.0, y), (x + 5.0, y)),
        ((x + 3.5, y), (x + 2.5, y + 2.5), (x + 2.5, y + 2.5)),
    ]
    points: List[Vec2] = []
    current = start
    for control_a, control_b, end in curves:
        points.extend(_cubic_bezier(current, control_a, control_b, end, steps))
        current = end
    # The path closes on its starting point; drop the duplicate.
    return points[:-1]


def create_heart_mesh(steps: int = 12, depth: float = 2.0) -> WireframeMesh:
    outline = heart_outline(steps)
    return extrude_outline(outline, _loop_segments(len(outline)), depth=depth)


def create_light_marker_mesh(size: float = 0.15) -> WireframeMesh:
    """Small octahedron marking the point light."""

    vertices: List[Vec3] = [
        (size, 0.0, 0.0),
        (-size, 0.0, 0.0),
        (0.0, size, 0.0),
        (0.0, -size, 0.0),
        (0.0, 0.0, size),
        (0.0, 0.0, -size),
    ]
    segments: List[Tuple[int, int]] = [
        (0, 2), (0, 3), (0, 4), (0, 5),
        (1, 2), (1, 3), (1, 4), (1, 5),
        (2, 4), (4, 3), (3, 5), (5, 2),
    ]
    return WireframeMesh(vertices, segments)
