import collections
import logging

import numpy

from . import geometry
from . import hermite
from . import tangents

logger = logging.getLogger(__name__)

SplinePoint = collections.namedtuple('SplinePoint', ('position', 'tangent', 'normal'))

# Parallel arrays, one row per generated sample. distances[i] is the length
# of the sample chain from sample 0 to sample i.
SplinePoints = collections.namedtuple('SplinePoints', ('positions', 'tangents', 'normals', 'distances'))

MIN_CONTROL_POINTS = 3

def as_control_points(points):
    """Convert a sequence of 3D positions to a (n, 3) float array.

    Raises ValueError if points is None, is not a list of 3D positions, or
    contains fewer than three points (too few to form a curve with defined
    neighbor tangents)."""
    if points is None:
        raise ValueError('Control points must be provided.')
    points = numpy.array(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError('Control points must be an array of 3D positions, not shape {}.'.format(points.shape))
    if len(points) < MIN_CONTROL_POINTS:
        raise ValueError('At least {} control points are required, got {}.'.format(MIN_CONTROL_POINTS, len(points)))
    return points

def check_resolution(resolution):
    """Return resolution as an int, raising ValueError unless it is an integer >= 2."""
    try:
        is_integer = not isinstance(resolution, bool) and int(resolution) == resolution
    except (TypeError, ValueError, OverflowError):
        is_integer = False
    if not is_integer:
        raise ValueError('Resolution must be an integer, got {!r}.'.format(resolution))
    resolution = int(resolution)
    if resolution < 2:
        raise ValueError('Resolution must be >= 2, got {}.'.format(resolution))
    return resolution

def segment_count(num_control_points, closed):
    """Number of segments: a closed curve has one extra, joining the last
    control point to the first."""
    return num_control_points if closed else num_control_points - 1

def point_count(num_control_points, resolution, closed):
    """Number of samples generated for a curve."""
    return resolution * segment_count(num_control_points, closed)

def generate_spline_points(control_points, resolution, closed=False, up=hermite.UP):
    """Tesselate a Catmull-Rom spline through the given control points.

    Parameters:
    control_points: array of shape (n,3), n >= 3.
    resolution: number of samples generated per segment, >= 2.
    closed: if True, an additional segment joins the last control point back
        to the first.
    up: reference axis used to derive normals (see hermite.normal_from_tangent).

    Each segment is sampled at t = 0, 1/resolution, ... (resolution-1)/resolution,
    so that the first sample of the next segment supplies its end point.
    The final segment has no successor, so it is sampled with a step of
    1/(resolution-1) instead, which puts its last sample at t = 1: on the last
    control point for an open curve, or back on the first for a closed one.

    Returns a SplinePoints tuple of arrays with point_count() rows.
    """
    control_points = as_control_points(control_points)
    resolution = check_resolution(resolution)
    n = len(control_points)
    num_segments = segment_count(n, closed)
    num_points = resolution * num_segments
    positions = numpy.empty((num_points, 3))
    tangent_vectors = numpy.empty((num_points, 3))
    normals = numpy.empty((num_points, 3))

    for segment in range(num_segments):
        p0 = control_points[segment]
        p1 = control_points[(segment + 1) % n]
        m0, m1 = tangents.segment_tangents(control_points, segment, closed)
        if segment == num_segments - 1:
            point_step = 1 / (resolution - 1)
        else:
            point_step = 1 / resolution
        t = numpy.arange(resolution) * point_step
        rows = slice(segment * resolution, (segment + 1) * resolution)
        positions[rows], tangent_vectors[rows], normals[rows] = hermite.evaluate(p0, p1, m0, m1, t, up)

    distances = geometry.cumulative_distances(positions, unit=False)
    degenerate = (~tangent_vectors.any(axis=1)).sum()
    if degenerate:
        logger.debug('%d of %d spline samples have a zero tangent', degenerate, num_points)
    logger.debug('Generated %d spline points from %d control points (closed=%s), length %.6g',
        num_points, n, closed, distances[-1])

    for array in (positions, tangent_vectors, normals, distances):
        array.flags.writeable = False
    return SplinePoints(positions, tangent_vectors, normals, distances)
