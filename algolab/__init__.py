"""Classic algorithms for study: sorting and timing, Horspool search, graph
traversal, shortest paths, spanning trees, N-queens, knapsack and two puzzles."""

__version__ = "1.0.0"