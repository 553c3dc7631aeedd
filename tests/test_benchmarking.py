from benchmarking import GRAPH_GENERATORS, MODEL_PARAMS, BenchmarkRunner
from mincut.algorithms import ALGORITHMS


def test_benchmark_frame():
    runner = BenchmarkRunner(ALGORITHMS, GRAPH_GENERATORS, seed=0)
    df = runner.run(models=['PLANTED', 'BA', 'UNKNOWN'], n_values=[8], trials=2,
                    model_params=MODEL_PARAMS, progress=False)

    assert len(df) == 2 * len(ALGORITHMS)
    assert set(df['algorithm']) == set(ALGORITHMS)
    assert set(df['model']) == {'PLANTED', 'BA'}
    assert (df['min_found_cut'] >= 0).all()
    assert df['success_rate'].between(0, 1).all()
