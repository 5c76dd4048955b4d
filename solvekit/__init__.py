"""Algorithm and data-structure routines for linked lists, binary trees, Fenwick trees, rolling hashes, prefix sums, graphs, dynamic programming, strings and arrays."""

__version__ = "0.1.0"