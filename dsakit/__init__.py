"""Classic data structures and algorithms: arrays, heaps, lists, trees, sorting, graphs and k-means."""

__version__ = "0.1.0"