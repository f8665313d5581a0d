import collections
import functools

import numpy as np


Point = collections.namedtuple('Point', ('x', 'y'))


class HullInputError(ValueError):
    """Raised when a point collection cannot produce a hull."""


def as_points(points):
    """
    Copy an input collection into a fresh list of Points.

    Parameters:
    -----------
    points : array-like, shape (N, 2)
        Lists of pairs, Points or a numpy array all work.

    Returns:
    --------
    list of Point
        A private working copy; the caller's collection is never touched.
    """
    try:
        arr = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise HullInputError(f"points must be (x, y) pairs: {exc}") from exc

    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise HullInputError(f"points must have shape (N, 2), got {arr.shape}")
    if arr.shape[0] < 3:
        raise HullInputError(f"a convex hull needs at least 3 points, got {arr.shape[0]}")

    return [Point(float(x), float(y)) for x, y in arr]


def orientation(a, b, c):
    """Signed area of (b - a) x (c - a): > 0 ccw, < 0 cw, 0 collinear."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def is_left_of(a, b):
    return a[0] < b[0] or (a[0] == b[0] and a[1] < b[1])


def leftmost_index(points):
    idx = 0
    for i in range(1, len(points)):
        if is_left_of(points[i], points[idx]):
            idx = i
    return idx


class CcwSorter:
    """
    Angular ordering about a fixed pivot.

    sorter(b, c) is True when c lies counter-clockwise of pivot->b, so
    sorted(points, key=sorter.key) yields increasing ccw angle. The pivot
    is copied on construction.
    """

    def __init__(self, pivot):
        self.pivot = Point(float(pivot[0]), float(pivot[1]))
        self.key = functools.cmp_to_key(self.compare)

    def __call__(self, b, c):
        return orientation(self.pivot, b, c) > 0

    def compare(self, b, c):
        if self(b, c):
            return -1
        if self(c, b):
            return 1
        return 0

    def __repr__(self):
        return f"CcwSorter(pivot={tuple(self.pivot)})"


def length(a, b):
    return np.sqrt((b[0] - a[0])**2 + (b[1] - a[1])**2)


def distance_to_line(a, b, p):
    # a == b gives inf or nan
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.abs(orientation(a, b, p)) / np.float64(length(a, b))


def farthest_point(a, b, points):
    """Index of the point farthest from line ab; the first one wins on ties."""
    arr = np.asarray(points, dtype=float).reshape(-1, 2)
    if len(arr) == 0:
        raise HullInputError("farthest_point needs at least one point")

    cross = (b[0] - a[0]) * (arr[:, 1] - a[1]) - (b[1] - a[1]) * (arr[:, 0] - a[0])
    with np.errstate(divide='ignore', invalid='ignore'):
        dists = np.abs(cross) / np.float64(length(a, b))
    return int(np.argmax(dists))
