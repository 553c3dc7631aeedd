from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from graph_generators.planted_cut import generate_planted_cut

__all__ = ['generate_ba', 'generate_er', 'generate_planted_cut']
