import numpy as np

from ch_general import length, orientation


def polygon_area(hull):
    """Signed shoelace area; positive when the vertices run counter-clockwise."""
    pts = np.asarray(hull, dtype=float).reshape(-1, 2)
    if len(pts) < 3:
        return 0.0
    x, y = pts[:, 0], pts[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def perimeter(hull):
    n = len(hull)
    return float(sum(length(hull[i], hull[(i + 1) % n]) for i in range(n)))


def diameter(hull):
    n = len(hull)
    if n < 2:
        return 0.0
    return float(max(length(hull[i], hull[j]) for i in range(n) for j in range(i + 1, n)))


def is_convex_ccw(hull):
    """True when every consecutive vertex triple, wrapping around, turns strictly left."""
    n = len(hull)
    if n < 3:
        return False
    return all(orientation(hull[i], hull[(i + 1) % n], hull[(i + 2) % n]) > 0 for i in range(n))


def point_in_hull(hull, p):
    """Inside-or-on test for a counter-clockwise convex hull."""
    n = len(hull)
    return all(orientation(hull[i], hull[(i + 1) % n], p) >= 0 for i in range(n))


def point_in_polygon(x, y, polygon):
    n = len(polygon)
    inside = False
    p1x, p1y = polygon[0]
    for i in range(1, n + 1):
        p2x, p2y = polygon[i % n]
        if y > min(p1y, p2y):
            if y <= max(p1y, p2y):
                if x <= max(p1x, p2x):
                    if p1y != p2y:
                        xinters = (y - p1y) * (p2x - p1x) / (p2y - p1y) + p1x
                    if p1x == p2x or x <= xinters:
                        inside = not inside
        p1x, p1y = p2x, p2y
    return inside


def contains_point(polygon, p):
    """Inside-or-on for convex ccw hulls, ray crossing for anything else."""
    if is_convex_ccw(polygon):
        return point_in_hull(polygon, p)
    return point_in_polygon(p[0], p[1], polygon)


def estimate_area(hull, N=5, h=0.01):
    """
    Grid estimate of the hull area.

    Parameters:
    -----------
    hull : array-like, shape (M, 2)
        Counter-clockwise convex polygon.
    N : float
        The grid covers [-N, N] in both directions.
    h : float
        Grid step.

    Returns:
    --------
    estimated_area : float
        Number of grid nodes inside the hull times h * h.
    """
    pts = np.asarray(hull, dtype=float).reshape(-1, 2)
    x, y = np.meshgrid(np.arange(-N, N+h, h), np.arange(-N, N+h, h))

    dom = np.ones(x.shape, dtype=bool)
    for a, b in zip(pts, np.roll(pts, -1, axis=0)):
        dom &= (b[0] - a[0]) * (y - a[1]) - (b[1] - a[1]) * (x - a[0]) >= 0

    cell_area = h * h
    return float(np.sum(dom) * cell_area)
