"""Classic data-structure and algorithm routines: trees, linked lists, containers, graphs, tries, strings, dynamic programming, greedy methods, arrays and counting."""

__version__ = "0.1.0"