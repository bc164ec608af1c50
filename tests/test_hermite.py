import math

import numpy
from numpy.testing import assert_allclose

from crspline import hermite

P0 = (0.0, 0.0, 0.0)
P1 = (1.0, 0.0, 0.0)
M = (1.0, 0.0, 0.0)


def test_position_hits_endpoints():
    p0, p1 = (1.0, 2.0, 3.0), (4.0, -1.0, 0.5)
    m0, m1 = (0.3, 0.0, 1.0), (-2.0, 1.0, 0.0)
    assert_allclose(hermite.position(p0, p1, m0, m1, 0.0), p0)
    assert_allclose(hermite.position(p0, p1, m0, m1, 1.0), p1)


def test_derivative_matches_endpoint_tangents():
    p0, p1 = (1.0, 2.0, 3.0), (4.0, -1.0, 0.5)
    m0, m1 = (0.3, 0.0, 1.0), (-2.0, 1.0, 0.0)
    assert_allclose(hermite.derivative(p0, p1, m0, m1, 0.0), m0)
    assert_allclose(hermite.derivative(p0, p1, m0, m1, 1.0), m1)


def test_array_parameter_gives_row_per_sample():
    positions = hermite.position(P0, P1, M, M, [0.0, 0.25, 0.5, 1.0])
    assert positions.shape == (4, 3)
    assert_allclose(positions[:, 0], [0.0, 0.25, 0.5, 1.0])
    assert_allclose(positions[:, 1:], 0.0)


def test_tangent_is_unit_length():
    t = numpy.linspace(0, 1, 11)
    tangents = hermite.tangent((0, 0, 0), (2, 1, 0), (1, 3, 0), (0, -1, 2), t)
    assert_allclose(numpy.linalg.norm(tangents, axis=1), 1.0)


def test_zero_derivative_gives_zero_tangent():
    tangent = hermite.tangent(P0, P0, P0, P0, 0.5)
    assert numpy.all(numpy.isfinite(tangent))
    assert_allclose(tangent, 0.0)


def test_normal_is_half_length_cross_with_up():
    assert_allclose(hermite.normal_from_tangent((1.0, 0.0, 0.0)), (0.0, 0.0, 0.5))


def test_normal_with_custom_up_axis():
    normal = hermite.normal_from_tangent((1.0, 0.0, 0.0), up=(0.0, 0.0, 1.0))
    assert_allclose(normal, (0.0, -0.5, 0.0))


def test_normal_parallel_to_up_is_zero():
    normal = hermite.normal_from_tangent((0.0, 1.0, 0.0))
    assert numpy.all(numpy.isfinite(normal))
    assert_allclose(normal, 0.0)


def test_evaluate_returns_consistent_triplet():
    position, tangent, normal = hermite.evaluate(P0, P1, M, M, 0.5)
    assert_allclose(position, (0.5, 0.0, 0.0))
    assert_allclose(tangent, (1.0, 0.0, 0.0))
    assert_allclose(normal, (0.0, 0.0, 0.5))


def test_segment_arc_length_straight_line():
    assert math.isclose(hermite.segment_arc_length(P0, P1, M, M), 1.0, rel_tol=1e-9)


def test_segment_arc_length_exceeds_chord():
    length = hermite.segment_arc_length(P0, P1, (0.0, 2.0, 0.0), (0.0, -2.0, 0.0))
    assert length > 1.0
