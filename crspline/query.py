"""Read-only lookups over generated spline samples.

All functions take a generate.SplinePoints tuple and raise
NotInitializedError if it is missing or empty.
"""

import numpy

from . import geometry

class NotInitializedError(RuntimeError):
    """Raised when spline samples are queried before they have been generated."""
    pass

def check_points(points):
    if points is None or len(points.positions) == 0:
        raise NotInitializedError('Spline not initialized.')
    return points

def _interp(x, xp, fp):
    """Linearly interpolate each column of fp, so that a (n,m) array of
    points can be sampled at scalar or array positions x."""
    return numpy.stack([numpy.interp(x, xp, column) for column in fp.T], axis=-1)

def curve_length(points):
    """Total length of the chain of generated samples, summed over every segment."""
    return check_points(points).distances[-1]

def points_num(points):
    return len(check_points(points).positions)

def position_at(points, t, normalized=True):
    """Return the position along the curve at parameter t.

    Parameters:
    points: SplinePoints tuple
    t: position along the curve, scalar or array. If normalized, t runs from
        0 (first sample) to 1 (last sample) with samples evenly spaced in t,
        regardless of their actual spacing. Otherwise t is first divided by
        the total curve length. Values outside the curve are clamped to its
        ends.

    Returns: shape (3) array for scalar t, or (n,3) for an array of n values.
    Positions between samples are linearly interpolated."""
    check_points(points)
    if not normalized:
        length = curve_length(points)
        if length == 0:
            raise ValueError('Cannot convert a distance to a parameter on a zero-length curve.')
        t = numpy.asarray(t, dtype=float) / length
    positions = points.positions
    p = numpy.clip(t, 0, 1) * (len(positions) - 1)
    return _interp(p, numpy.arange(len(positions)), positions)

def position_at_distance(points, distance, closed=False):
    """Return the position at a given arc length along the sample chain.

    Unlike position_at(), this accounts for uneven sample spacing. On a closed
    curve, distances wrap around the loop; on an open curve they are clamped
    to the ends."""
    check_points(points)
    distance = numpy.asarray(distance, dtype=float)
    length = points.distances[-1]
    if closed and length > 0:
        distance = distance % length
    return _interp(distance, points.distances, points.positions)

def resample(points, num_points):
    """Resample the sample chain to contain a given number of points,
    equally spaced in arc length, using linear interpolation.

    Returns an array of shape (num_points, 3)."""
    check_points(points)
    if num_points < 2:
        raise ValueError('At least 2 points are required for resampling, got {}.'.format(num_points))
    sample_positions = numpy.linspace(0, points.distances[-1], num_points)
    return _interp(sample_positions, points.distances, points.positions)

def closest_point(points, point):
    """Find the position along the sample chain nearest to a given point.

    Returns: closest_point, distance
      closest_point: the nearest position on the polyline joining the samples.
      distance: the arc length from the first sample to closest_point."""
    check_points(points)
    return geometry.closest_point_on_polyline(point, points.positions, points.distances)
