import collections
import logging
import time

import numpy as np
from scipy.spatial import ConvexHull
import matplotlib.pyplot as plt

from ch_general import Point, as_points, leftmost_index
from convex_hull_area import contains_point, diameter, perimeter, polygon_area
from convex_hull_gift_wrapping import gift_wrapping
from convex_hull_graham_scan import graham_scan
from convex_hull_monotone_chain import monotone_chain
from convex_hull_quickhull import quickhull

logger = logging.getLogger(__name__)

N_POINTS = 100
BOUNDS = (-100.0, 100.0)
SEED = 42
DEFAULT_METHOD = 'monotone_chain'

ALGORITHMS = collections.OrderedDict([
    ('gift_wrapping', gift_wrapping),
    ('graham_scan', graham_scan),
    ('monotone_chain', monotone_chain),
    ('quickhull', quickhull),
])


def compute_hull(points, method=DEFAULT_METHOD):
    try:
        algorithm = ALGORITHMS[method]
    except KeyError:
        raise ValueError(f"unknown hull method {method!r}, expected one of {list(ALGORITHMS)}") from None
    return algorithm(points)


def normalize_hull(hull):
    """
    Rotate a hull to start at its lexicographic minimum and run counter-clockwise.

    Makes hulls from different algorithms (or from scipy) directly comparable.
    """
    hull = [Point(float(p[0]), float(p[1])) for p in hull]
    if polygon_area(hull) < 0:
        hull.reverse()
    start = leftmost_index(hull)
    return hull[start:] + hull[:start]


def reference_hull(points):
    """Hull from scipy's Qhull wrapper, normalised for comparison."""
    points = np.asarray(as_points(points))
    hull = ConvexHull(points)
    # for 2-D input the vertices already come counter-clockwise
    return normalize_hull(points[hull.vertices])


def generate_points(N=N_POINTS, bounds=BOUNDS, seed=None):
    if seed is not None:
        np.random.seed(seed)
    return np.random.uniform(bounds[0], bounds[1], size=(N, 2))


def compare_algorithms(points, methods=None):
    """
    Run several hull algorithms on the same points and cross-check them.

    Parameters:
    -----------
    points : array-like, shape (N, 2)
        Input point set, N >= 3.
    methods : iterable of str, optional
        Names from ALGORITHMS; all of them by default.

    Returns:
    --------
    results : dict
        'points', 'hulls' (name -> normalised hull), 'timings' (name -> seconds),
        'reference' (scipy hull), 'agree' (name -> bool), 'outside'
        (name -> input points the hull misses) and 'summary_stats'.
    """
    points = np.asarray(as_points(points))
    methods = list(methods) if methods is not None else list(ALGORITHMS)

    reference = reference_hull(points)
    results = {
        'points': points,
        'hulls': collections.OrderedDict(),
        'timings': collections.OrderedDict(),
        'reference': reference,
        'agree': collections.OrderedDict(),
        'outside': collections.OrderedDict(),
        'summary_stats': {}
    }

    for name in methods:
        start_time = time.time()
        hull = compute_hull(points, name)
        results['timings'][name] = time.time() - start_time

        hull = normalize_hull(hull)
        results['hulls'][name] = hull
        results['agree'][name] = hull == reference
        results['outside'][name] = sum(not contains_point(hull, p) for p in points)
        if not results['agree'][name]:
            logger.warning("%s disagrees with the reference hull (%d vs %d vertices)",
                           name, len(hull), len(reference))

    results['summary_stats'] = {
        'total_points': len(points),
        'hull_vertices': len(reference),
        'area': polygon_area(reference),
        'perimeter': perimeter(reference),
        'diameter': diameter(reference),
        'all_agree': all(results['agree'].values()),
    }
    return results


def print_summary(results):
    stats = results['summary_stats']
    print("\n" + "="*50)
    print("CONVEX HULL COMPARISON SUMMARY")
    print("="*50)
    print(f"Total points: {stats['total_points']}")
    print(f"Hull vertices: {stats['hull_vertices']}")
    print(f"Area: {stats['area']:.4f}")
    print(f"Perimeter: {stats['perimeter']:.4f}")
    print(f"Diameter: {stats['diameter']:.4f}")
    for name, hull in results['hulls'].items():
        status = "ok" if results['agree'][name] else f"MISMATCH, {results['outside'][name]} points outside"
        print(f"{name:>15}: {len(hull)} vertices in {results['timings'][name] * 1000:.3f} ms [{status}]")
    print(f"All algorithms agree: {stats['all_agree']}")


def plot_hulls(results, show=True):
    points = results['points']
    hulls = results['hulls']

    fig, axes = plt.subplots(2, 2, figsize=(10, 10))

    for ax, (name, hull) in zip(axes.ravel(), hulls.items()):
        hull_array = np.array(hull)
        hull_plot = np.vstack([hull_array, hull_array[0]])

        ax.scatter(points[:, 0], points[:, 1], c='blue', s=20, alpha=0.6)
        ax.plot(hull_plot[:, 0], hull_plot[:, 1], 'r-', linewidth=2)
        ax.scatter(hull_array[:, 0], hull_array[:, 1], c='red', s=60, marker='s')
        ax.set_title(f"{name} ({len(hull)} vertices)")
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

    for ax in axes.ravel()[len(hulls):]:
        ax.axis('off')

    plt.tight_layout()
    if show:
        plt.show()
    return fig


def main(N=N_POINTS, seed=SEED, plot=True):
    logging.basicConfig(level=logging.INFO)

    points = generate_points(N=N, seed=seed)
    print(f"Computing convex hulls of {len(points)} points...")

    results = compare_algorithms(points)
    for name, hull in results['hulls'].items():
        print(f"\n{name} point count: {len(hull)}")
        for p in hull:
            print(f"{p.x:.4f}, {p.y:.4f}")

    print_summary(results)
    if plot:
        plot_hulls(results)
    return results


if __name__ == "__main__":
    main()
