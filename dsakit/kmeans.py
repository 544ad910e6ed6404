"""K-means clustering over tab-separated data."""

from __future__ import annotations

import argparse
import math
import random
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

_FEATURE_COLUMNS = frozenset({4, 9, 10, 11, 12, 13, 14})
_NUMBER_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


@dataclass
class Point:
    """A feature vector and the index of the cluster it belongs to (-1 if none)."""

    features: list[float]
    cluster_id: int = -1


class KMeans:
    """K-means with random initial centroids and a fixed number of iterations."""

    def __init__(self, k: int = 5, max_iterations: int = 100,
                 rng: random.Random | None = None) -> None:
        if k <= 0:
            raise ValueError("k must be positive")
        self.k = k
        self.max_iterations = max_iterations
        self._rng = rng or random.Random()
        self.centroids: list[list[float]] = []

    def train(self, points: Sequence[Point]) -> None:
        """Cluster ``points`` in place, setting each point's ``cluster_id``."""
        if not points:
            raise ValueError("cannot train on an empty data set")
        width = len(points[0].features)
        if any(len(p.features) != width for p in points):
            raise ValueError("all points must have the same number of features")
        self.centroids = [
            list(points[self._rng.randrange(len(points))].features) for _ in range(self.k)
        ]
        for _ in range(self.max_iterations):
            self._assign(points)
            self._update(points, width)

    def _assign(self, points: Sequence[Point]) -> None:
        for point in points:
            point.cluster_id = min(
                range(self.k),
                key=lambda i: math.dist(point.features, self.centroids[i]),
            )

    def _update(self, points: Sequence[Point], width: int) -> None:
        sums = [[0.0] * width for _ in range(self.k)]
        counts = [0] * self.k
        for point in points:
            total = sums[point.cluster_id]
            for j, value in enumerate(point.features):
                total[j] += value
            counts[point.cluster_id] += 1
        # An empty cluster keeps an all-zero centroid.
        self.centroids = [
            [value / count for value in total] if count else total
            for total, count in zip(sums, counts)
        ]

    def cluster_counts(self, points: Sequence[Point]) -> list[int]:
        """Number of points in each cluster."""
        counts = [0] * self.k
        for point in points:
            if not 0 <= point.cluster_id < self.k:
                raise ValueError("point has not been assigned to a cluster")
            counts[point.cluster_id] += 1
        return counts

    def summary(self, points: Sequence[Point]) -> str:
        """Render cluster sizes and final centroids."""
        lines = ["", "Cluster summary:"]
        lines += [
            f"Cluster {i}: {count} elements"
            for i, count in enumerate(self.cluster_counts(points))
        ]
        lines += ["", "Final centroids:"]
        lines += [
            f"Cluster {i} centroid: " + "".join(f"{value:g} " for value in centroid)
            for i, centroid in enumerate(self.centroids)
        ]
        return "\n".join(lines) + "\n"


def _parse_number(text: str) -> float:
    match = _NUMBER_PREFIX.match(text)
    return float(match.group().strip()) if match else 0.0


def load_dataset(path: str | Path) -> list[Point]:
    """Read points from a tab-separated file with a header line.

    Columns 4 and 9 to 14 become features; empty or unparsable cells count as 0.
    Rows that have none of those columns are skipped.
    """
    points = []
    with open(path, encoding="utf-8") as source:
        next(source, None)
        for row in source:
            row = row.rstrip("\n")
            if not row:
                continue
            cells = row.split("\t")
            if cells[-1] == "":
                cells.pop()
            features = [
                _parse_number(cell)
                for index, cell in enumerate(cells)
                if index in _FEATURE_COLUMNS
            ]
            if features:
                points.append(Point(features))
    return points


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Cluster a tab-separated data set.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    parser.add_argument("-k", type=int, default=5)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    try:
        points = load_dataset(args.path)
    except OSError:
        points = []
    if not points:
        print("Error uploading file.")
        return 0
    model = KMeans(args.k, args.iterations, random.Random(args.seed))
    model.train(points)
    print(model.summary(points), end="")
    return 0