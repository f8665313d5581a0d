import logging

from ch_general import as_points, orientation

logger = logging.getLogger(__name__)


def half_hull(sorted_points):
    """Chain of strict left turns through points taken in the given order."""
    chain = []
    for p in sorted_points:
        while len(chain) >= 2 and orientation(chain[-2], chain[-1], p) <= 0:
            chain.pop()
        chain.append(p)
    return chain


def monotone_chain(points):
    """
    Andrew's monotone chain.

    Points are sorted lexicographically, the lower chain is built left to
    right and the upper chain right to left. Both chains share their end
    points, so those are dropped from the upper one.
    """
    points = sorted(as_points(points))

    lower = half_hull(points)
    upper = half_hull(reversed(points))

    hull = lower + upper[1:-1]
    logger.debug("monotone chain: %d points -> %d hull vertices", len(points), len(hull))
    return hull
