"""Type aliases and sentinels shared by the shortest-path algorithms."""

from __future__ import annotations

from typing import List, Union

# Ordered vertex ids from source to destination; empty means "no path"
Path = List[int]

Weight = int

# Distance-matrix marker for unreachable pairs; compares above any int
INF: float = float("inf")

# Cells hold int distances, or INF when unreachable
DistanceMatrix = List[List[Union[Weight, float]]]
