import collections
import logging

import numpy

from . import generate
from . import hermite
from . import query
from . import tangents

logger = logging.getLogger(__name__)

CurveConfig = collections.namedtuple('CurveConfig', ('resolution', 'closed_loop', 'up'))

class CatmullRom(object):
    """A Catmull-Rom spline through a set of 3D control points, tesselated
    into a fixed number of samples per segment.

    The generated samples (positions, unit tangents, normals and cumulative
    distances) are regenerated in full whenever the control points or the
    settings change. Each generation produces a new read-only SplinePoints
    snapshot, so a snapshot obtained from get_points() is never modified by
    later updates.

    The number of samples is resolution * (n - 1) for an open curve of n
    control points, and resolution * n for a closed one. An open curve ends
    exactly on its last control point; a closed curve ends back on its first.

    Example:
        curve = CatmullRom([(0,0,0), (1,1,0), (2,0,0), (3,1,0)], resolution=10)
        midpoint = curve.get_position(0.5, normalized=True)
    """
    _points = None

    def __init__(self, control_points, resolution, closed_loop=False, up=hermite.UP):
        """Parameters:
            control_points: sequence of n >= 3 positions (x, y, z).
            resolution: samples per segment, an integer >= 2.
            closed_loop: if True, the curve loops from the last control point
                back to the first.
            up: reference axis used to derive the sample normals.

        Raises ValueError on invalid input; nothing is generated in that case.
        """
        control_points = generate.as_control_points(control_points)
        resolution = generate.check_resolution(resolution)
        up = numpy.array(up, dtype=float)
        if up.shape != (3,):
            raise ValueError('Up axis must be a 3D vector.')
        up.flags.writeable = False
        self._control_points = control_points
        self._config = CurveConfig(resolution, bool(closed_loop), up)
        self._generate()

    @classmethod
    def from_transforms(cls, transforms, resolution, closed_loop=False, up=hermite.UP):
        """Construct from objects with a 'position' attribute, such as
        scene-graph transforms."""
        return cls([transform.position for transform in transforms], resolution, closed_loop, up)

    def __repr__(self):
        if self._points is None:
            return 'CatmullRom(uninitialized)'
        return 'CatmullRom({} control points, resolution={}, closed_loop={})'.format(
            len(self._control_points), self.resolution, self.closed_loop)

    def _generate(self):
        self._points = generate.generate_spline_points(self._control_points,
            self._config.resolution, self._config.closed_loop, self._config.up)

    def _validate_points(self):
        return query.check_points(self._points)

    @property
    def config(self):
        self._validate_points()
        return self._config

    @property
    def resolution(self):
        return self.config.resolution

    @property
    def closed_loop(self):
        return self.config.closed_loop

    @property
    def up(self):
        return self.config.up.copy()

    @property
    def control_points(self):
        self._validate_points()
        return self._control_points.copy()

    def get_points(self):
        """Return the generated SplinePoints snapshot."""
        return self._validate_points()

    def point(self, i):
        """Return sample i as a SplinePoint(position, tangent, normal)."""
        points = self._validate_points()
        return generate.SplinePoint(points.positions[i], points.tangents[i], points.normals[i])

    def get_position(self, t, normalized=False):
        """Return the position at t along the curve (see query.position_at).

        If normalized is False, t is a length along the curve, which is
        converted to a parameter by dividing by get_curve_length()."""
        return query.position_at(self._validate_points(), t, normalized)

    def get_curve_length(self):
        """Length of the polyline through all generated samples."""
        return query.curve_length(self._validate_points())

    def get_points_num(self):
        return query.points_num(self._validate_points())

    def position_at_distance(self, distance):
        return query.position_at_distance(self._validate_points(), distance, self.closed_loop)

    def resample(self, num_points):
        return query.resample(self._validate_points(), num_points)

    def closest_point(self, point):
        """Return the nearest point on the sampled curve and its distance
        along the curve."""
        return query.closest_point(self._validate_points(), point)

    def integrated_length(self):
        """Arc length of the continuous spline, integrated segment by segment.

        This is always at least get_curve_length(), which measures the
        polyline through the samples and converges to this value as the
        resolution increases."""
        self._validate_points()
        control_points = self._control_points
        n = len(control_points)
        length = 0
        for segment in range(generate.segment_count(n, self.closed_loop)):
            m0, m1 = tangents.segment_tangents(control_points, segment, self.closed_loop)
            p0 = control_points[segment]
            p1 = control_points[(segment + 1) % n]
            length += hermite.segment_arc_length(p0, p1, m0, m1)
        return length

    def update_control_points(self, control_points):
        """Replace the control points and regenerate the curve.

        Raises ValueError (leaving the curve unchanged) if control_points is
        None or holds fewer than three 3D positions."""
        control_points = generate.as_control_points(control_points)
        logger.debug('Updating %s with %d control points', self, len(control_points))
        self._control_points = control_points
        self._generate()

    def update_settings(self, resolution, closed_loop):
        """Replace the resolution and closed-loop flag and regenerate the curve.

        Raises ValueError (leaving the curve unchanged) if resolution < 2."""
        resolution = generate.check_resolution(resolution)
        logger.debug('Updating %s to resolution=%d, closed_loop=%s', self, resolution, closed_loop)
        self._config = self._config._replace(resolution=resolution, closed_loop=bool(closed_loop))
        self._generate()
