import pytest

from rendering.meshes import (
    create_box_mesh,
    create_ground_mesh,
    create_heart_mesh,
    create_light_marker_mesh,
    create_sphere_mesh,
    create_torus_mesh,
    extrude_outline,
    heart_outline,
)


ALL_MESHES = [
    create_box_mesh(1.0),
    create_sphere_mesh(0.8, 32),
    create_torus_mesh(0.7, 0.2, 16, 100),
    create_ground_mesh(20.0, 20),
    create_heart_mesh(12, 2.0),
    create_light_marker_mesh(0.15),
]


@pytest.mark.parametrize("mesh", ALL_MESHES)
def test_segments_reference_existing_vertices(mesh) -> None:
    count = len(mesh.vertices)
    assert mesh.segments
    for start, end in mesh.segments:
        assert 0 <= start < count
        assert 0 <= end < count
        assert start != end


def test_box_has_cube_topology() -> None:
    box = create_box_mesh(2.0)
    assert len(box.vertices) == 8
    assert len(box.segments) == 12
    assert box.bounds() == ((-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))


def test_torus_segment_count() -> None:
    torus = create_torus_mesh(radial_segments=8, tubular_segments=10)
    assert len(torus.vertices) == 80
    assert len(torus.segments) == 2 * 80


def test_ground_lies_flat() -> None:
    ground = create_ground_mesh(size=4.0, divisions=4)
    assert len(ground.segments) == 10
    assert {y for _, y, _ in ground.vertices} == {0.0}


def test_heart_outline_is_closed_without_duplicate() -> None:
    outline = heart_outline(steps=5)
    assert len(outline) == 6 * 5 - 1
    assert outline[-1] != outline[0]


def test_heart_mesh_is_extruded() -> None:
    mesh = create_heart_mesh(steps=4, depth=2.0)
    low, high = mesh.bounds()
    assert len(mesh.vertices) == 2 * (6 * 4 - 1)
    assert low[2] == pytest.approx(-1.0)
    assert high[2] == pytest.approx(1.0)


def test_extrude_skips_duplicate_edges() -> None:
    mesh = extrude_outline([(0.0, 0.0), (1.0, 0.0)], [(0, 1), (1, 0)], depth=1.0)
    assert len(mesh.segments) == 4


def test_centered_mesh_bounds_are_symmetric() -> None:
    mesh = create_heart_mesh().centered()
    low, high = mesh.bounds()
    for lo, hi in zip(low, high):
        assert lo == pytest.approx(-hi, abs=1e-5)


def test_arrays_match_mesh() -> None:
    mesh = create_box_mesh()
    assert mesh.vertex_array().shape == (8, 3)
    assert mesh.index_array().shape == (24,)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: create_sphere_mesh(segments=2),
        lambda: create_torus_mesh(radial_segments=2),
        lambda: create_ground_mesh(divisions=0),
        lambda: heart_outline(steps=0),
    ],
)
def test_invalid_resolution_is_rejected(factory) -> None:
    with pytest.raises(ValueError):
        factory()
