import numpy

def normalize(vectors, eps=1e-12):
    """Return vectors scaled to unit length.

    Parameters:
    vectors: array of shape (m) representing a single vector, or of shape
        (n,m) containing n vectors in m dimensions.
    eps: vectors with a length at or below this value are degenerate: they
        have no direction, and are returned as zero vectors rather than NaN."""
    vectors = numpy.asarray(vectors, dtype=float)
    lengths = numpy.sqrt((vectors**2).sum(axis=-1))[..., numpy.newaxis]
    out = numpy.zeros_like(vectors)
    numpy.divide(vectors, lengths, out=out, where=lengths > eps)
    return out

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths.

    A zero-length polyline has no meaningful unit parameterization; in that
    case all-zero distances are returned even if unit is True."""
    points = numpy.asarray(points, dtype=float)
    segment_lengths = numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1))
    distances = numpy.concatenate([[0], numpy.add.accumulate(segment_lengths)])
    if unit and distances[-1] > 0:
        distances /= distances[-1]
    return distances

def closest_point_on_polyline(point, points, parameters=None):
    """Return the point along a polyline nearest the given point and the parametric
    position of that point along the polyline.

    Parameters:
    point: position of shape (m)
    points: array of shape (n,m), n >= 2, defining the polyline.
    parameters: parameter value at each polyline vertex. If None, the
        cumulative distance along the polyline is used.

    Each line segment is projected onto in turn; a zero-length segment
    projects every point onto its start."""
    points = numpy.asarray(points, dtype=float)
    point = numpy.asarray(point, dtype=float)
    starts = points[:-1]
    spans = points[1:] - starts
    span_lengths2 = (spans**2).sum(axis=1)
    fractions = numpy.zeros_like(span_lengths2)
    numpy.divide(((point - starts) * spans).sum(axis=1), span_lengths2, out=fractions, where=span_lengths2 > 0)
    fractions = fractions.clip(0, 1)
    projections = starts + fractions[:, numpy.newaxis] * spans
    segment = ((point - projections)**2).sum(axis=1).argmin()
    if parameters is None:
        parameters = cumulative_distances(points, unit=False)
    start_u, stop_u = parameters[segment:segment+2]
    return projections[segment], start_u + fractions[segment] * (stop_u - start_u)
