import numpy as np
import pytest

from htm_pooler.config import PoolerConfig
from htm_pooler.homeostasis import BOOST_STEP, Homeostasis, neighbor_means
from htm_pooler.inhibition import neighborhood_bounds


def _homeostasis(column_count, radius=1, period=4, min_overlap=0.5, increment=0.05):
    cfg = PoolerConfig(
        input_length=10,
        column_count=column_count,
        active_columns_per_area=1,
        inhibition_radius=radius,
        potential_pool_size=2,
        permanence_increment=increment,
        duty_cycle_period=period,
        min_overlap_duty_cycle=min_overlap,
    )
    return Homeostasis(cfg)


def test_neighbor_means_exclude_self():
    lo, hi = neighborhood_bounds(4, 1)
    means = neighbor_means(np.array([0.0, 1.0, 0.0, 1.0]), lo, hi)
    assert means.tolist() == [1.0, 0.0, 1.0, 0.0]


def test_empty_neighborhood_mean_is_zero():
    lo, hi = neighborhood_bounds(1, 3)
    assert neighbor_means(np.array([0.7]), lo, hi).tolist() == [0.0]


def test_duty_cycles_are_moving_averages(make_pool):
    pool = make_pool([[0, 1], [2, 3]], active_duty=[0.5, 0.5], overlap_duty=[0.5, 0.5])
    h = _homeostasis(2, period=4)
    h.update_duty_cycles(pool, np.array([True, False]), np.array([2.5, 0.0], dtype=np.float32))
    assert pool.active_duty_cycles.tolist() == pytest.approx([0.625, 0.375])
    # boosted score of 2.5 saturates the overlap average
    assert pool.overlap_duty_cycles.tolist() == pytest.approx([1.0, 0.375])


def test_overlap_duty_cycle_averages_boosted_score(make_pool):
    pool = make_pool([[0, 1], [2, 3]])
    h = _homeostasis(2, period=10)
    h.update_duty_cycles(pool, np.array([False, False]), np.array([5.0, 0.5], dtype=np.float32))
    assert pool.overlap_duty_cycles.tolist() == pytest.approx([0.5, 0.05])
    assert pool.active_duty_cycles.tolist() == [0.0, 0.0]


def test_period_one_tracks_last_cycle(make_pool):
    pool = make_pool([[0, 1], [2, 3]], active_duty=[0.3, 0.8])
    h = _homeostasis(2, period=1)
    h.update_duty_cycles(pool, np.array([True, False]), np.array([1.0, 0.0], dtype=np.float32))
    assert pool.active_duty_cycles.tolist() == [1.0, 0.0]
    assert pool.overlap_duty_cycles.tolist() == [1.0, 0.0]


def test_boost_follows_neighborhood_mean(make_pool):
    pool = make_pool([[0, 1], [2, 3], [4, 5]],
                     boosts=[1.0, 0.5, 0.0], active_duty=[0.5, 0.0, 0.5])
    _homeostasis(3, radius=1).update_boosts(pool)
    # col 0: 0.5 >= 0.0 -> up; col 1: 0.0 < 0.5 -> down, floored; col 2: up
    assert pool.boosts.tolist() == [1.0 + BOOST_STEP, 0.0, BOOST_STEP]


def test_boost_never_negative(make_pool):
    pool = make_pool([[0, 1], [2, 3]], boosts=[0.0, 0.0], active_duty=[0.0, 0.9])
    h = _homeostasis(2, radius=1)
    for _ in range(3):
        h.update_boosts(pool)
    assert pool.boosts[0] == 0.0
    assert pool.boosts[1] == 3 * BOOST_STEP


def test_equal_duty_cycles_all_boost_up(make_pool):
    n = 30
    pool = make_pool([[0, 1]] * n, active_duty=[0.1] * n)
    _homeostasis(n, radius=10).update_boosts(pool)
    assert np.all(pool.boosts == 1.0 + BOOST_STEP)


def test_rescue_raises_starving_columns(make_pool):
    pool = make_pool([[0, 1], [2, 3]], permanences=[[0.5, 0.98], [0.5, 0.5]],
                     overlap_duty=[0.1, 0.9])
    rescued = _homeostasis(2, min_overlap=0.5, increment=0.05).rescue(pool)
    assert rescued.tolist() == [True, False]
    assert pool.permanences[0].tolist() == pytest.approx([0.55, 1.0])
    assert pool.permanences[1].tolist() == [0.5, 0.5]


def test_step_rescues_inactive_column(make_pool):
    pool = make_pool([[0, 1], [2, 3]])
    h = _homeostasis(2, min_overlap=0.5)
    rescued = h.step(pool, np.array([False, True]), np.array([0.0, 2.0], dtype=np.float32))
    # column 1 reaches 2.0 / 4 = 0.5, which is not below the minimum
    assert rescued.tolist() == [True, False]
    assert np.allclose(pool.permanences[0], 0.55)
    assert np.all(pool.permanences[1] == 0.5)


def test_tiny_neighbor_mean_still_decrements(make_pool):
    pool = make_pool([[0, 1], [2, 3], [4, 5]],
                     boosts=[3.0, 3.0, 3.0], active_duty=[0.0, 5e-9, 5e-9])
    _homeostasis(3, radius=2).update_boosts(pool)
    assert pool.boosts.tolist() == [2.0, 4.0, 4.0]
