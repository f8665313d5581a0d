import logging

from ch_general import HullInputError, as_points, leftmost_index, orientation

logger = logging.getLogger(__name__)


def dist2(p1, p2):
    return (p1[0] - p2[0]) * (p1[0] - p2[0]) + (p1[1] - p2[1]) * (p1[1] - p2[1])


def gift_wrapping(points):
    """
    Jarvis march: start at the leftmost point and keep wrapping.

    From each hull point pick the candidate that leaves every other point
    counter-clockwise of (or collinear with) the new edge. O(n*h).
    Collinear candidates resolve to the farthest one, so points in the
    middle of an edge are skipped; exact duplicates keep the first found.
    """
    points = as_points(points)
    n = len(points)

    start = leftmost_index(points)
    current = start
    hull = [points[start]]

    while True:
        nxt = 0
        for i in range(1, n):
            if nxt == current:
                nxt = i
                continue
            turn = orientation(points[current], points[nxt], points[i])
            if turn < 0 or (turn == 0 and dist2(points[current], points[i]) > dist2(points[current], points[nxt])):
                nxt = i

        if nxt == start:
            break
        if len(hull) == n:
            # NaN coordinates compare false everywhere and can keep the walk open
            raise HullInputError("gift wrapping did not return to its start point")

        hull.append(points[nxt])
        current = nxt

    logger.debug("gift wrapping: %d points -> %d hull vertices", n, len(hull))
    return hull
