from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from mincut.errors import PreconditionViolation
from mincut.union_find import DisjointSet


@dataclass(order=True)
class Cut:
    """
    A cut found by contraction: the number of crossing edges and the
    DisjointSet recording which vertices ended up on the same side.

    Cuts compare by size only, so min() over trials keeps the best one.
    """
    cut_size: int
    disjoint_set: DisjointSet = field(compare=False, repr=False)

    def partitions(self) -> Tuple[FrozenSet[int], FrozenSet[int]]:
        """
        The two vertex sets of the cut: vertex 0's side first.

        Only meaningful once the DisjointSet has been contracted down to two
        components, which every Cut returned by a driver satisfies.
        """
        if self.disjoint_set.num_components != 2:
            raise PreconditionViolation(
                "partitions need a disjoint set contracted to 2 components, "
                f"got {self.disjoint_set.num_components}")

        roots = self.disjoint_set.roots()
        side = roots == roots[0]
        P = frozenset(int(v) for v in side.nonzero()[0])
        Q = frozenset(int(v) for v in (~side).nonzero()[0])
        return P, Q


def partitions(cut: Cut) -> Tuple[FrozenSet[int], FrozenSet[int]]:
    return cut.partitions()
