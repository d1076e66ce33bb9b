from array import array

class UnionFind:
    """Disjoint sets over integer ids 0..n-1 (row-major cell ids for Kruskal)."""

    __slots__ = ('parent',)

    def __init__(self, n: int):
        self.parent = array('i', range(n))

    def find(self, a: int) -> int:
        root = a
        while self.parent[root] != root:
            root = self.parent[root]
        # Path compression
        while self.parent[a] != root:
            self.parent[a], a = root, self.parent[a]
        return root

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int):
        ra = self.find(a)
        rb = self.find(b)
        if ra != rb:
            self.parent[rb] = ra
