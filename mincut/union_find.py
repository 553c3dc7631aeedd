import numpy as np


class DisjointSet:
    """
    Union-Find over the vertex ids 0..n-1, tracking which original vertices
    have been merged into the same super-vertex.

    Union by size with two-phase path compression.
    """
    __slots__ = ['parent', 'size', 'num_components']

    def __init__(self, n: int):
        self.parent = np.arange(n, dtype=np.int64)
        self.size = np.ones(n, dtype=np.int64)
        self.num_components = n

    def __len__(self) -> int:
        return self.parent.shape[0]

    def find(self, i: int) -> int:
        root = i
        while root != self.parent[root]:
            root = int(self.parent[root])

        curr = i
        while curr != root:
            nxt = int(self.parent[curr])
            self.parent[curr] = root
            curr = nxt
        return root

    def union(self, i: int, j: int) -> bool:
        root_i = self.find(i)
        root_j = self.find(j)

        if root_i == root_j:
            return False

        # ties attach j's root under i's root
        if self.size[root_i] < self.size[root_j]:
            root_i, root_j = root_j, root_i
        self.parent[root_j] = root_i
        self.size[root_i] += self.size[root_j]

        self.num_components -= 1
        return True

    def connected(self, i: int, j: int) -> bool:
        return self.find(i) == self.find(j)

    def roots(self) -> np.ndarray:
        """
        Representative of every vertex, fully compressing the structure.
        """
        return np.fromiter((self.find(i) for i in range(len(self))),
                           dtype=np.int64, count=len(self))

    def copy(self) -> 'DisjointSet':
        other = DisjointSet.__new__(DisjointSet)
        other.parent = self.parent.copy()
        other.size = self.size.copy()
        other.num_components = self.num_components
        return other
