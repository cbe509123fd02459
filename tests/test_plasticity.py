import numpy as np

from htm_pooler.plasticity import learn


def test_active_columns_learn(make_pool):
    pool = make_pool([[0, 1], [2, 3]])
    bits = np.array([True, False, True, False])
    learn(pool, bits, np.array([True, False]), increment=0.05, decrement=0.02)
    assert np.allclose(pool.permanences[0], [0.55, 0.48])
    assert np.all(pool.permanences[1] == 0.5)


def test_permanences_clamp(make_pool):
    pool = make_pool([[0, 1]], permanences=[[0.98, 0.01]])
    learn(pool, np.array([True, False]), np.array([True]), increment=0.05, decrement=0.02)
    assert pool.permanences[0].tolist() == [1.0, 0.0]


def test_no_active_columns_is_a_noop(make_pool):
    pool = make_pool([[0, 1], [2, 3]])
    learn(pool, np.ones(4, dtype=bool), np.zeros(2, dtype=bool), increment=0.5, decrement=0.5)
    assert np.all(pool.permanences == 0.5)
