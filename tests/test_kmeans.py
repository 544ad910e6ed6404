import random
from statistics import fmean

import pytest

from dsakit.kmeans import KMeans, Point, load_dataset, main

GROUP_A = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0]]
GROUP_B = [[10.0, 10.0], [10.0, 11.0], [11.0, 10.0]]


def _points():
    return [Point(list(f)) for f in GROUP_A + GROUP_B]


def test_point_starts_unassigned():
    assert Point([1.0]).cluster_id == -1


@pytest.mark.parametrize("seed", range(8))
def test_two_groups_are_separated(seed):
    points = _points()
    model = KMeans(2, 20, random.Random(seed))
    model.train(points)
    a_ids = {p.cluster_id for p in points[:3]}
    b_ids = {p.cluster_id for p in points[3:]}
    assert len(a_ids) == 1 and len(b_ids) == 1
    assert a_ids != b_ids
    assert sorted(model.cluster_counts(points)) == [3, 3]
    expected = sorted(
        [fmean(col) for col in zip(*group)] for group in (GROUP_A, GROUP_B)
    )
    for got, want in zip(sorted(model.centroids), expected):
        assert got == pytest.approx(want)


def test_empty_cluster_gets_zero_centroid():
    points = [Point([5.0, 5.0]) for _ in range(3)]
    model = KMeans(2, 3, random.Random(1))
    model.train(points)
    assert model.cluster_counts(points) == [3, 0]
    assert model.centroids == [[5.0, 5.0], [0.0, 0.0]]


def test_train_rejects_empty():
    with pytest.raises(ValueError):
        KMeans(2, 5).train([])


def test_train_rejects_mixed_widths():
    with pytest.raises(ValueError):
        KMeans(1, 5).train([Point([1.0]), Point([1.0, 2.0])])


def test_k_must_be_positive():
    with pytest.raises(ValueError):
        KMeans(0, 5)


def test_cluster_counts_before_training():
    with pytest.raises(ValueError):
        KMeans(2, 5).cluster_counts(_points())


def test_summary_lists_every_cluster():
    points = _points()
    model = KMeans(2, 10, random.Random(3))
    model.train(points)
    text = model.summary(points)
    assert "Cluster 0: 3 elements" in text
    assert "Cluster 1: 3 elements" in text
    assert text.count("centroid:") == 2


def _row(values):
    return "\t".join(values) + "\n"


def test_load_dataset_extracts_columns(tmp_path):
    cells = [str(i) for i in range(15)]
    cells[9] = ""
    cells[10] = "abc"
    cells[11] = "2.5x"
    path = tmp_path / "data.txt"
    path.write_text(
        _row(["header"] * 15) + _row(cells) + _row(["a", "b"]), encoding="utf-8"
    )
    points = load_dataset(path)
    assert len(points) == 1
    assert points[0].features == [4.0, 0.0, 0.0, 2.5, 12.0, 13.0, 14.0]
    assert points[0].cluster_id == -1


def test_load_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dataset(tmp_path / "missing.txt")


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 0
    assert capsys.readouterr().out == "Error uploading file.\n"


def test_main_prints_summary(tmp_path, capsys):
    lines = [_row(["h"] * 15)]
    for features in GROUP_A + GROUP_B:
        cells = ["0"] * 15
        cells[4] = str(features[0])
        cells[9] = str(features[1])
        lines.append(_row(cells))
    path = tmp_path / "data.txt"
    path.write_text("".join(lines), encoding="utf-8")
    assert main([str(path), "-k", "2", "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Cluster 0: 3 elements" in out
    assert "Cluster 1: 3 elements" in out