"""
example from: http://www.glicko.net/glicko/glicko2.pdf
"""
import pytest
import numpy as np
from glicko_period import Player, RatingPeriod, MatchResult


def make_example_players():
    player = Player.from_glicko(1500.0, 200.0, 0.06, name='player')
    opponents = [
        Player.from_glicko(1400.0, 30.0, 0.06, name='opponent 1'),
        Player.from_glicko(1550.0, 100.0, 0.06, name='opponent 2'),
        Player.from_glicko(1700.0, 300.0, 0.06, name='opponent 3'),
    ]
    return player, opponents


def test_glicko2():
    player, opponents = make_example_players()
    period = RatingPeriod(tau=0.5)
    # the player wins the first and loses the next 2
    period.add_match(player, opponents[0], MatchResult.WIN)
    period.add_match(player, opponents[1], MatchResult.LOSS)
    period.add_match(player, opponents[2], MatchResult.LOSS)
    period.calculate()
    # this is a really weak tolerance but alas Mr. Glickoman rounded to 4 decimal points at each step of the example
    assert player.post.rating == pytest.approx(-0.2069, abs=1e-4)
    assert player.post.deviation == pytest.approx(0.8722, abs=1e-4)
    assert player.post.volatility == pytest.approx(0.05999, abs=1e-5)

    rating, rd, volatility = player.post.to_glicko()
    assert rating == pytest.approx(1464.06, abs=0.1)
    assert rd == pytest.approx(151.52, abs=0.1)


def test_glicko2_from_arrays():
    player, opponents = make_example_players()
    players = [player] + opponents
    matchups = np.array([[0, 1], [0, 2], [0, 3]])  # competitor 0 plays in 3 matchups
    outcomes = np.array([1.0, 0.0, 0.0])
    period = RatingPeriod.from_arrays(players, matchups, outcomes, tau=0.5)
    period.calculate()
    assert player.post.rating == pytest.approx(-0.2069, abs=1e-4)
    assert player.post.deviation == pytest.approx(0.8722, abs=1e-4)
    assert player.pre.rating == 0.0
