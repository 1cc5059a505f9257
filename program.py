import argparse
import logging
import sys
import time

import numpy as np

import constants
from geometry import InvalidCoordinate, Point2D
from graham_scan import GrahamScan
from point_sources import (
    PointFileError, generate_clusters, read_points, write_point_blocks, write_points,
)
from util import timeit

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        "convex-hull-cluster",
        description="Convex hulls of point clusters by Graham scan",
    )
    parser.add_argument("--input", type=str, default=None,
                        help="point file; when omitted, random clusters are generated")
    parser.add_argument("--output", type=str, default=None,
                        help="write hull points to this file")
    parser.add_argument("--clusters", type=positive_int, default=constants.CLUSTER_COUNT)
    parser.add_argument("--cluster-size", type=positive_int, default=constants.CLUSTER_SIZE)
    parser.add_argument("--seed", type=int, default=constants.SEED)
    parser.add_argument("--width", type=positive_int, default=constants.WIDTH)
    parser.add_argument("--height", type=positive_int, default=constants.HEIGHT)
    parser.add_argument("--max-step", type=positive_int, default=constants.MAX_STEP)
    parser.add_argument("--plot", action="store_true", help="show hulls in a window")
    parser.add_argument("--save-figure", type=str, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


@timeit
def compute_hulls(clusters: list[list[Point2D]]) -> list[list[Point2D]]:
    scan = GrahamScan()
    return [scan.compute_hull(cluster) for cluster in clusters]


def load_clusters(args) -> list[list[Point2D]]:
    if args.input:
        return [read_points(args.input)]
    rng = np.random.default_rng(args.seed)
    return generate_clusters(rng, args.clusters, args.cluster_size,
                             width=args.width, height=args.height,
                             max_step=args.max_step)


def save_hulls(path_name: str, hulls: list[list[Point2D]]):
    if len(hulls) == 1:
        write_points(path_name, hulls[0])
    else:
        write_point_blocks(path_name, hulls)


def export_plot(args, clusters, hulls):
    import matplotlib
    if not args.plot:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    from visualization import plot_clusters

    fig, ax = plt.subplots(figsize=(args.width / 100, args.height / 100))
    plot_clusters(clusters, hulls, ax=ax)
    ax.set_title(f"Graham scan ({sum(map(len, clusters))} points)")
    if args.save_figure:
        fig.savefig(args.save_figure, dpi=150, bbox_inches='tight')
        logger.info("Saved figure to %s", args.save_figure)
    if args.plot:
        plt.show()
    plt.close(fig)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=constants.LOG_FORMAT)

    wall_start, cpu_start = time.perf_counter(), time.process_time()
    try:
        clusters = load_clusters(args)
        logger.info("Loaded %s points in %s clusters",
                    sum(map(len, clusters)), len(clusters))

        hulls = compute_hulls(clusters)
        logger.info("Computed %s hulls with %s vertices in total",
                    len(hulls), sum(map(len, hulls)))

        if args.output:
            save_hulls(args.output, hulls)
            logger.info("Saved hulls to %s", args.output)
    except (PointFileError, InvalidCoordinate, OSError) as e:
        logger.error("%s", e)
        return 1

    if args.plot or args.save_figure:
        export_plot(args, clusters, hulls)

    logger.info("CPU time: %f sec, wall-clock time: %f sec",
                time.process_time() - cpu_start, time.perf_counter() - wall_start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
