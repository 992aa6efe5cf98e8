"""Tests for colordle.logic.solve.engine: multi-start coordinate search."""

import pytest

from colordle.core.conversions import rgb_to_lab
from colordle.core.difference import delta_e_ciede2000
from colordle.core.models import Constraint
from colordle.core.scoring import total_squared_error
from colordle.logic.solve import engine
from colordle.logic.solve.engine import coordinate_search, get_start_points, solve, solve_detailed


def exact_constraints(target_rgb, guesses):
    target_lab = rgb_to_lab(*target_rgb)
    return [Constraint(g, 100.0 - delta_e_ciede2000(target_lab, rgb_to_lab(*g))) for g in guesses]


class TestStartPoints:
    def test_fixed_points_then_mean(self):
        constraints = [Constraint((0, 255, 255), 50), Constraint((255, 0, 255), 50)]
        points = get_start_points(constraints)
        assert points == [
            (128.0, 128.0, 128.0),
            (64.0, 64.0, 64.0),
            (192.0, 192.0, 192.0),
            (127.5, 127.5, 255.0),
        ]

    def test_no_mean_without_constraints(self):
        assert len(get_start_points([])) == 3


class TestSolve:
    def test_empty_constraints_return_midpoint(self):
        assert solve([]) == (128, 128, 128)

    def test_exact_start_is_kept(self):
        assert solve([Constraint((128, 128, 128), 100)]) == (128, 128, 128)

    def test_guess_mean_start_hits_exact_guess(self):
        # the mean-of-guesses start is the guess itself, with zero error
        assert solve([Constraint((200, 60, 40), 100)]) == (200, 60, 40)

    def test_returns_integers_in_range(self):
        rgb = solve([Constraint((0, 255, 255), 47.69), Constraint((255, 255, 0), 26.16)])
        assert all(isinstance(v, int) and 0 <= v <= 255 for v in rgb)

    def test_deterministic(self):
        constraints = exact_constraints((52, 84, 109), [(0, 255, 255), (255, 0, 255), (255, 255, 0), (255, 255, 255)])
        assert solve(constraints) == solve(constraints)

    def test_not_worse_than_any_start(self):
        constraints = exact_constraints((52, 84, 109), [(0, 255, 255), (255, 0, 255), (255, 255, 0), (255, 255, 255)])
        result = solve_detailed(constraints)
        for start in get_start_points(constraints):
            assert result.total_squared_error <= total_squared_error(start, constraints)
        assert result.start_point in get_start_points(constraints)


class TestCoordinateSearch:
    def test_stays_inside_cube(self):
        point, error = coordinate_search((250.0, 250.0, 5.0), [Constraint((255, 255, 0), 100)])
        assert all(0.0 <= v <= 255.0 for v in point)
        assert error == pytest.approx(0.0, abs=1e-6)

    def test_never_increases_error(self):
        constraints = [Constraint((10, 200, 90), 70)]
        start = (64.0, 64.0, 64.0)
        _, error = coordinate_search(start, constraints)
        assert error <= total_squared_error(start, constraints)


@pytest.fixture
def l1_error(monkeypatch):
    """Swap the score fit for L1 distance to (192, 64, 128) and record every point tried."""
    target = (192, 64, 128)
    tried = []

    def fake_error(point, constraints, metric):
        tried.append(tuple(point))
        return sum(abs(p - t) for p, t in zip(point, target))

    monkeypatch.setattr(engine, 'total_squared_error', fake_error)
    return tried


class TestSearchTrajectory:
    def test_first_improvement_in_direction_order(self, l1_error):
        point, error = coordinate_search((128.0, 128.0, 128.0), [])
        assert point == (192, 64, 128)
        assert error == 0

        assert l1_error[0] == (128, 128, 128)
        # step 64, first sweep: each accepted move becomes the base for the next direction
        assert l1_error[1:7] == [
            (192, 128, 128),  # +R accepted
            (128, 128, 128),  # -R from the new point
            (192, 192, 128),  # +G
            (192, 64, 128),   # -G accepted
            (192, 64, 192),   # +B
            (192, 64, 64),    # -B
        ]
        # second sweep at step 64 moves nowhere; +R is clamped to 255
        assert l1_error[7:13] == [
            (255, 64, 128), (128, 64, 128),
            (192, 128, 128), (192, 0, 128),
            (192, 64, 192), (192, 64, 64),
        ]
        # one idle sweep for each of the remaining eight step sizes
        assert len(l1_error) == 1 + 6 * 2 + 6 * 8
        assert l1_error[-6:] == [
            (192 + 0.1, 64, 128), (192 - 0.1, 64, 128),
            (192, 64 + 0.1, 128), (192, 64 - 0.1, 128),
            (192, 64, 128 + 0.1), (192, 64, 128 - 0.1),
        ]

    def test_earliest_start_wins_ties(self, l1_error):
        result = solve_detailed([Constraint((0, 0, 0), 50)])
        assert result.rgb == (192, 64, 128)
        assert result.total_squared_error == 0
        assert result.start_point == (128.0, 128.0, 128.0)
