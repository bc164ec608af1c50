"""Evaluation of single cubic Hermite curve segments.

A Hermite segment runs from p0 to p1 over t in [0, 1], leaving p0 along the
tangent vector m0 and arriving at p1 along m1:

    (2t^3 - 3t^2 + 1) p0 + (t^3 - 2t^2 + t) m0 + (-2t^3 + 3t^2) p1 + (t^3 - t^2) m1

Catmull-Rom splines are Hermite curves whose tangents are estimated from the
neighboring control points (see crspline.tangents).

All functions accept either a scalar t, in which case a single vector of
shape (m) is returned, or an array of n parameter values, in which case an
array of shape (n,m) is returned.
"""

import numpy
from scipy import integrate

from . import geometry

# reference axis for normals, y-up as in most 3D engines
UP = numpy.array([0, 1, 0], dtype=float)

def _basis_args(p0, p1, m0, m1, t):
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis]
    p0, p1, m0, m1 = [numpy.asarray(v, dtype=float) for v in (p0, p1, m0, m1)]
    return p0, p1, m0, m1, t

def position(p0, p1, m0, m1, t):
    """Return the position on the segment (p0, p1, m0, m1) at parameter t."""
    p0, p1, m0, m1, t = _basis_args(p0, p1, m0, m1, t)
    t2 = t * t
    t3 = t2 * t
    return ((2*t3 - 3*t2 + 1) * p0
        + (t3 - 2*t2 + t) * m0
        + (-2*t3 + 3*t2) * p1
        + (t3 - t2) * m1)

def derivative(p0, p1, m0, m1, t):
    """Return the (unnormalized) first derivative of the segment at parameter t."""
    p0, p1, m0, m1, t = _basis_args(p0, p1, m0, m1, t)
    t2 = t * t
    return ((6*t2 - 6*t) * p0
        + (3*t2 - 4*t + 1) * m0
        + (-6*t2 + 6*t) * p1
        + (3*t2 - 2*t) * m1)

def tangent(p0, p1, m0, m1, t):
    """Return the unit tangent of the segment at parameter t.

    Where the derivative vanishes (e.g. a segment with coincident endpoints
    and zero tangents) the direction of travel is undefined and the zero
    vector is returned."""
    return geometry.normalize(derivative(p0, p1, m0, m1, t))

def normal_from_tangent(tangent, up=UP):
    """Return a normal vector of half-unit length for the given tangent(s).

    The normal is the cross product of the tangent with a fixed reference
    'up' axis. This is a convenience convention, not the true (Frenet)
    normal of the curve: it ignores curvature entirely, and it is undefined
    where the tangent is parallel to 'up' or is itself zero. In those cases
    the zero vector is returned.

    Parameters:
    tangent: array of shape (3) or (n,3) of unit tangents.
    up: reference axis, shape (3). Supply the up axis of your coordinate
        system if it is not +y.
    """
    return geometry.normalize(numpy.cross(tangent, up)) / 2

def evaluate(p0, p1, m0, m1, t, up=UP):
    """Evaluate a segment at parameter t (scalar or array).

    Returns: position, tangent, normal
      position: point(s) on the curve
      tangent: unit tangent(s); zero where the derivative vanishes.
      normal: half-length normal(s) from normal_from_tangent()
    """
    pos = position(p0, p1, m0, m1, t)
    tan = tangent(p0, p1, m0, m1, t)
    return pos, tan, normal_from_tangent(tan, up)

def segment_arc_length(p0, p1, m0, m1):
    """Return the arc length of the continuous segment over t in [0, 1].

    Unlike the length of a sampled polyline, which always underestimates
    the curve length, this integrates the magnitude of the derivative
    numerically (with scipy.integrate.quad)."""
    def speed(t):
        d = derivative(p0, p1, m0, m1, t)
        return numpy.sqrt((d**2).sum())
    length, abserr = integrate.quad(speed, 0, 1)
    return length
