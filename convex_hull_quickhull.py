import logging

from ch_general import as_points, farthest_point, orientation

logger = logging.getLogger(__name__)


def _find_hull(points, p, q, hull):
    """
    Append the hull chain from p to q for points lying right of p->q.

    Works off an explicit LIFO task list instead of recursion. A split task
    pushes its right half, the farthest point and its left half in reverse
    so they come back off the stack in output order.
    """
    tasks = [('split', points, p, q)]
    max_tasks = 1

    while tasks:
        task = tasks.pop()
        if task[0] == 'emit':
            hull.append(task[1])
            continue

        _, subset, a, b = task
        if not subset:
            continue

        f = subset[farthest_point(a, b, subset)]
        before = [pt for pt in subset if orientation(a, f, pt) < 0]
        after = [pt for pt in subset if orientation(f, b, pt) < 0]

        tasks.append(('split', after, f, b))
        tasks.append(('emit', f))
        tasks.append(('split', before, a, f))
        max_tasks = max(max_tasks, len(tasks))

    logger.debug("quickhull chain %s -> %s: peak task list %d", p, q, max_tasks)


def quickhull(points):
    points = as_points(points)

    # Point tuples order the same way as is_left_of.
    a = min(points)
    b = max(points)

    # Points exactly on line ab cannot be hull vertices and are dropped.
    lower = [p for p in points if orientation(a, b, p) < 0]
    upper = [p for p in points if orientation(b, a, p) < 0]

    hull = [a]
    _find_hull(lower, a, b, hull)
    hull.append(b)
    _find_hull(upper, b, a, hull)

    logger.debug("quickhull: %d points -> %d hull vertices", len(points), len(hull))
    return hull
