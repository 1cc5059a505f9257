import logging
import matplotlib
import pytest

matplotlib.use("Agg")

from geometry import Point2D
from graham_scan import compute_hull, is_convex
from point_sources import read_points, write_points
from program import main, parse_args
from util import timeit


def test_parse_args_defaults():
    args = parse_args([])
    assert args.input is None
    assert args.clusters == 10
    assert args.cluster_size == 100
    assert args.seed == 42
    assert (args.width, args.height) == (720, 560)
    assert not args.plot and not args.verbose


def test_hull_of_point_file(tmp_path):
    src, dst = tmp_path / "points.txt", tmp_path / "hull.txt"
    points = [Point2D(x, y) for x, y in [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2), (1, 3)]]
    write_points(src, points)

    assert main(["--input", str(src), "--output", str(dst)]) == 0
    assert read_points(dst) == [Point2D(0, 0), Point2D(4, 0), Point2D(4, 4), Point2D(0, 4)]


def test_generated_clusters(tmp_path):
    dst = tmp_path / "hulls.txt"
    argv = ["--clusters", "3", "--cluster-size", "15", "--seed", "7",
            "--width", "200", "--height", "150", "--max-step", "50",
            "--output", str(dst)]
    assert main(argv) == 0

    lines = dst.read_text(encoding="utf-8").splitlines()
    hulls = []
    while lines:
        n = int(lines[0])
        hulls.append([Point2D(*map(float, line.split())) for line in lines[1:n + 1]])
        lines = lines[n + 1:]
    assert len(hulls) == 3
    for hull in hulls:
        assert is_convex(hull)
        assert compute_hull(hull) == hull

    assert main(argv[:-1] + [str(tmp_path / "again.txt")]) == 0
    assert (tmp_path / "again.txt").read_text(encoding="utf-8") == dst.read_text(encoding="utf-8")


def test_save_figure(tmp_path):
    figure = tmp_path / "hulls.png"
    argv = ["--clusters", "2", "--cluster-size", "10", "--save-figure", str(figure)]
    assert main(argv) == 0
    assert figure.stat().st_size > 0


@pytest.mark.parametrize("text", ["2\n1 2\n", "1\nnan 0\n"])
def test_bad_point_file(tmp_path, caplog, text):
    src = tmp_path / "points.txt"
    src.write_text(text, encoding="utf-8")
    with caplog.at_level(logging.ERROR):
        assert main(["--input", str(src)]) == 1
    assert caplog.records


def test_missing_point_file(tmp_path):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_timeit_logs_elapsed_time(caplog):
    @timeit
    def work(a, b=1):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="util"):
        assert work(2, b=3) == 5
    assert work.__name__ == "work"
    assert any("elapsed time" in r.getMessage() for r in caplog.records)


def test_binary_point_file(tmp_path, caplog):
    src = tmp_path / "points.bin"
    src.write_bytes(b"\xff\xfe\x00garbage")
    with caplog.at_level(logging.ERROR):
        assert main(["--input", str(src)]) == 1
    assert caplog.records


@pytest.mark.parametrize("option", ["--clusters", "--cluster-size", "--width", "--height", "--max-step"])
@pytest.mark.parametrize("value", ["0", "-5", "ten"])
def test_sizes_must_be_positive(option, value, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([option, value])
    assert exc_info.value.code == 2
    assert option in capsys.readouterr().err
