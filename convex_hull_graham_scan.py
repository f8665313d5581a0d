import logging

from ch_general import CcwSorter, as_points, leftmost_index, orientation

logger = logging.getLogger(__name__)


def graham_scan(points):
    points = as_points(points)

    # Leftmost point goes to the front, the rest are sorted by angle around it.
    first = leftmost_index(points)
    points[0], points[first] = points[first], points[0]
    pivot = points[0]
    rest = sorted(points[1:], key=CcwSorter(pivot).key)

    hull = [pivot, rest[0], rest[1]]
    for p in rest[2:]:
        # drop anything that is not a strict left turn
        while len(hull) >= 2 and orientation(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    logger.debug("graham scan: %d points -> %d hull vertices", len(points), len(hull))
    return hull
