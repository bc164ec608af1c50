"""Line geometry for drawing generated splines.

These functions only compute (starts, ends) arrays of line segments; the
actual drawing, colors, and any gizmos are up to the caller's renderer.
"""

import numpy

from . import query

def spline_segments(points, closed=False):
    """Return line segments joining each sample to the next.

    For a closed curve an extra segment joins the last sample to the first.

    Returns: starts, ends; arrays of shape (k,3)."""
    positions = query.check_points(points).positions
    if closed:
        return positions, numpy.roll(positions, -1, axis=0)
    return positions[:-1], positions[1:]

def vector_rays(points, vectors='normals', extrusion=1):
    """Return segments from each sample along its normal or tangent.

    Parameters:
    points: SplinePoints tuple
    vectors: 'normals' or 'tangents'
    extrusion: length scale applied to the vectors.

    Returns: starts, ends; arrays of shape (n,3)."""
    query.check_points(points)
    if vectors not in ('normals', 'tangents'):
        raise ValueError('vectors must be "normals" or "tangents", not "{}".'.format(vectors))
    starts = points.positions
    return starts, starts + getattr(points, vectors) * extrusion
