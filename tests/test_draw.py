import pytest
from numpy.testing import assert_allclose

from crspline import draw
from crspline import generate
from crspline import query

SQUARE = [(0.0, 0.0, 0.0), (2.0, 0.0, 0.0), (2.0, 0.0, 2.0), (0.0, 0.0, 2.0)]


def test_open_segments_join_consecutive_samples():
    points = generate.generate_spline_points(SQUARE, 4)
    starts, ends = draw.spline_segments(points)
    assert len(starts) == len(points.positions) - 1
    assert_allclose(starts[1:], ends[:-1])


def test_closed_segments_wrap_to_first_sample():
    points = generate.generate_spline_points(SQUARE, 4, closed=True)
    starts, ends = draw.spline_segments(points, closed=True)
    assert len(starts) == len(points.positions)
    assert_allclose(ends[-1], points.positions[0])


def test_rays_are_scaled_vectors():
    points = generate.generate_spline_points(SQUARE, 4)
    starts, ends = draw.vector_rays(points, 'normals', extrusion=3)
    assert_allclose(ends - starts, points.normals * 3)
    starts, ends = draw.vector_rays(points, 'tangents', extrusion=0.5)
    assert_allclose(ends - starts, points.tangents * 0.5)


def test_unknown_ray_vectors():
    points = generate.generate_spline_points(SQUARE, 4)
    with pytest.raises(ValueError):
        draw.vector_rays(points, 'binormals')


def test_drawing_before_generation():
    with pytest.raises(query.NotInitializedError):
        draw.spline_segments(None)
    with pytest.raises(query.NotInitializedError):
        draw.vector_rays(None)
