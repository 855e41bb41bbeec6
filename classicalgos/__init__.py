"""Classic algorithms: binary search, merge and quick sort, fractional knapsack,
Kruskal's minimum spanning tree and the optimal merge pattern."""

__version__ = "0.1.0"