import logging
import os

import numpy as np

from constants import Distribution, HEIGHT, MAX_STEP, WIDTH
from geometry import Point2D

logger = logging.getLogger(__name__)


class PointFileError(ValueError):
    pass


def read_points(path_name: str | os.PathLike) -> list[Point2D]:
    """
    Read points from a text file: the number of points n on the first line,
    followed by n lines with whitespace separated x and y.
    """
    try:
        with open(path_name, 'r', encoding='utf-8') as fh:
            lines = (line.strip() for line in fh)
            lines = [line for line in lines if line]
    except UnicodeDecodeError as e:
        raise PointFileError(f'{path_name}: not a UTF-8 text file ({e.reason})') from e

    if not lines:
        raise PointFileError(f'{path_name}: missing point count')
    try:
        n = int(lines[0])
    except ValueError:
        raise PointFileError(f'{path_name}: bad point count {lines[0]!r}') from None
    if n < 0:
        raise PointFileError(f'{path_name}: negative point count {n}')
    if len(lines) - 1 < n:
        raise PointFileError(f'{path_name}: expected {n} points, found {len(lines) - 1}')

    points = []
    for line_no, line in enumerate(lines[1:n + 1], start=2):
        fields = line.split()
        if len(fields) != 2:
            raise PointFileError(f'{path_name}:{line_no}: expected "x y", got {line!r}')
        try:
            x, y = map(float, fields)
        except ValueError:
            raise PointFileError(f'{path_name}:{line_no}: bad coordinates {line!r}') from None
        points.append(Point2D(x, y))

    logger.debug("Loaded %s points from %s", len(points), path_name)
    return points


def _write_block(fh, points: list[Point2D]):
    fh.write(f'{len(points)}\n')
    for p in points:
        fh.write(f'{p.x!r} {p.y!r}\n')


def write_points(path_name: str | os.PathLike, points: list[Point2D]):
    with open(path_name, 'w', encoding='utf-8') as fh:
        _write_block(fh, points)


def write_point_blocks(path_name: str | os.PathLike, blocks: list[list[Point2D]]):
    """
    Write several point sets one after another, each in point file format.
    read_points on the result returns the first set.
    """
    with open(path_name, 'w', encoding='utf-8') as fh:
        for points in blocks:
            _write_block(fh, points)


def generate_cluster(
    rng: np.random.Generator,
    size: int,
    width: int = WIDTH,
    height: int = HEIGHT,
    max_step: int = MAX_STEP,
) -> list[Point2D]:
    """
    Random walk on the integer grid [0, width) x [0, height).
    Candidates are drawn uniformly over the whole area, a candidate is
    accepted when it is no farther from the previously accepted point than
    a random integer in [0, max_step).
    """
    if size <= 0:
        return []

    cluster = [Point2D(rng.integers(width), rng.integers(height))]
    while len(cluster) < size:
        candidate = Point2D(rng.integers(width), rng.integers(height))
        if cluster[-1].distance_to(candidate) <= rng.integers(max_step):
            cluster.append(candidate)
    return cluster


def generate_clusters(
    rng: np.random.Generator,
    n_clusters: int,
    cluster_size: int,
    width: int = WIDTH,
    height: int = HEIGHT,
    max_step: int = MAX_STEP,
) -> list[list[Point2D]]:
    clusters = [generate_cluster(rng, cluster_size, width, height, max_step)
                for _ in range(n_clusters)]
    logger.debug("Generated %s clusters of %s points", n_clusters, cluster_size)
    return clusters


def generate_points(
    rng: np.random.Generator,
    n: int,
    distribution: Distribution | str = Distribution.UNIFORM,
    width: float = WIDTH,
    height: float = HEIGHT,
) -> list[Point2D]:
    distribution = Distribution(distribution)
    cx, cy = width / 2, height / 2

    if distribution == Distribution.UNIFORM:
        xs = rng.uniform(0, width, n)
        ys = rng.uniform(0, height, n)
    elif distribution == Distribution.GAUSSIAN:
        xs = rng.normal(cx, width / 6, n)
        ys = rng.normal(cy, height / 6, n)
    elif distribution == Distribution.CIRCLE:
        angles = rng.uniform(0, 2 * np.pi, n)
        radii = min(cx, cy) * np.sqrt(rng.uniform(0, 1, n))
        xs = cx + radii * np.cos(angles)
        ys = cy + radii * np.sin(angles)
    else:
        n_clusters = 5
        centers = rng.uniform((0.1 * width, 0.1 * height), (0.9 * width, 0.9 * height),
                              size=(n_clusters, 2))
        labels = rng.integers(n_clusters, size=n)
        spread = min(width, height) / 20
        xs = rng.normal(centers[labels, 0], spread)
        ys = rng.normal(centers[labels, 1], spread)

    return [Point2D(x, y) for x, y in zip(xs.tolist(), ys.tolist())]
