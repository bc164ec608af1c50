"""Catmull-Rom tangent estimation.

The tangent at control point k is the central difference of its neighbors:
    M[k] = (P[k+1] - P[k-1]) / 2

On a closed curve the indices wrap around, so every point has two real
neighbors. On an open curve the end points have only one neighbor, and the
one-sided difference to it is used instead (still halved):
    M[0] = (P[1] - P[0]) / 2
    M[n-1] = (P[n-1] - P[n-2]) / 2
"""

import numpy

def control_point_tangent(control_points, k, closed):
    """Return the tangent vector at control point k.

    Parameters:
    control_points: array of shape (n,m)
    k: index of the control point, 0 <= k < n
    closed: if True, the curve wraps from the last control point to the first.
    """
    control_points = numpy.asarray(control_points, dtype=float)
    n = len(control_points)
    if closed:
        after = control_points[(k + 1) % n]
        before = control_points[(k - 1) % n]
    else:
        after = control_points[min(k + 1, n - 1)]
        before = control_points[max(k - 1, 0)]
    return (after - before) / 2

def segment_tangents(control_points, segment, closed):
    """Return the tangents (m0, m1) at the start and end of a segment.

    Segment i runs from control point i to control point i+1, or, for the
    final segment of a closed curve, from the last control point back to the
    first. Tangents are computed fresh for each segment."""
    n = len(control_points)
    end = (segment + 1) % n if closed else segment + 1
    m0 = control_point_tangent(control_points, segment, closed)
    m1 = control_point_tangent(control_points, end, closed)
    return m0, m1
