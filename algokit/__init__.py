"""Classic algorithms and data structures in plain Python: arrays, bits, searching,
strings, stacks, linked lists, heaps, greedy methods, mathematics, backtracking,
disjoint sets, graphs, spanning trees, network flow and trees."""

__version__ = "0.1.0"