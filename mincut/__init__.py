from mincut.cut import Cut, partitions
from mincut.graph import Graph
from mincut.karger import karger
from mincut.karger_stein import karger_stein

__all__ = ['Cut', 'Graph', 'karger', 'karger_stein', 'partitions']
