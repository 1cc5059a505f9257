import itertools
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from constants import COLORS
from geometry import Point2D


def plot_points(points: list[Point2D], ax: Axes | None = None, **style) -> Axes:
    if ax is None:
        ax = plt.gca()
    x = [p.x for p in points]
    y = [p.y for p in points]
    ax.scatter(x, y, **style)
    return ax


def plot_hull(
    hull: list[Point2D],
    ax: Axes | None = None,
    color: str | None = None,
    label: str | None = None,
) -> Axes:
    """
    Draw hull boundary as a closed polygon.
    Degenerate hulls are drawn as a segment or a single marker.
    """
    if ax is None:
        ax = plt.gca()
    if not hull:
        return ax

    closed = hull + [hull[0]] if len(hull) > 2 else hull
    xs = [p.x for p in closed]
    ys = [p.y for p in closed]
    ax.plot(xs, ys, 'o-', c=color, markersize=3, label=label)
    return ax


def plot_clusters(
    clusters: list[list[Point2D]],
    hulls: list[list[Point2D]],
    ax: Axes | None = None,
) -> Axes:
    if ax is None:
        ax = plt.gca()
    color_cycle = itertools.cycle(COLORS)

    for cluster, hull in zip(clusters, hulls):
        clr = next(color_cycle)
        plot_points(cluster, ax=ax, c=clr, s=2)
        plot_hull(hull, ax=ax, color=clr)

    ax.set_aspect('equal')
    ax.grid(True, alpha=0.3)
    return ax
