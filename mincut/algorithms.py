from typing import Callable, Dict, NamedTuple

from mincut.cut import Cut
from mincut.karger import karger
from mincut.karger_stein import karger_stein
from mincut.repetition import karger_repeat_count, karger_stein_repeat_count


class MinimumCutAlgorithm(NamedTuple):
    name: str
    function: Callable[..., Cut]
    default_repeat_count: Callable[[int], int]

    def __call__(self, graph, repeat_count: int = None, **kwargs) -> Cut:
        if repeat_count is None:
            repeat_count = self.default_repeat_count(graph.n)
        return self.function(graph, repeat_count, **kwargs)


ALGORITHMS: Dict[str, MinimumCutAlgorithm] = {
    'karger': MinimumCutAlgorithm("Karger", karger, karger_repeat_count),
    'karger_stein': MinimumCutAlgorithm("Karger-Stein", karger_stein, karger_stein_repeat_count),
}
