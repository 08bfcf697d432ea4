"""Rating periods: registration of players and matches, and the batched Glicko 2 update"""
import logging
import math
from typing import Dict, List, Set
import numpy as np
from glicko_period.core.update import g_scalar, g_vector, update_rating
from glicko_period.errors import Glicko2Error, InvalidConfiguration, NumericalNonConvergence
from glicko_period.models.match import Match, MatchResult
from glicko_period.models.player import Player
from glicko_period.utils.constants import DEFAULT_TAU, EPSILON, MAX_ITER
from glicko_period.utils.math_utils import sigmoid, sigmoid_scalar

logger = logging.getLogger(__name__)


class RatingPeriod:
    """
    One evaluation window of the Glicko 2 rating system.

    All matches registered in a period are treated as simultaneous: every player's update
    reads only the pre period states of itself and its opponents.
    """

    def __init__(self, tau: float = DEFAULT_TAU, epsilon: float = EPSILON, max_iter: int = MAX_ITER):
        """
        Parameters:
            tau (float): The system constant which constrains the change in volatility over time.
                Reasonable choices are between 0.3 and 1.2, smaller values prevent large swings
                of volatility when the data contains very improbable results.
            epsilon (float, optional): Convergence tolerance of the volatility root-finder. Defaults to 1e-6.
            max_iter (int, optional): Iteration cap of the volatility root-finder. Defaults to 1000.
        """
        if not (math.isfinite(tau) and tau > 0.0):
            raise InvalidConfiguration(f'tau must be positive, got {tau}')
        if not (math.isfinite(epsilon) and epsilon > 0.0):
            raise InvalidConfiguration(f'epsilon must be positive, got {epsilon}')
        if max_iter < 1:
            raise InvalidConfiguration(f'max_iter must be at least 1, got {max_iter}')
        self.tau = tau
        self.epsilon = epsilon
        self.max_iter = max_iter
        # keyed on id, the values keep the players alive so ids are never reused
        self._players: Dict[int, Player] = {}
        self.matches: List[Match] = []
        # ids stay unique since self.matches keeps every match alive
        self._match_ids: Set[int] = set()

    @classmethod
    def from_arrays(
        cls,
        players: list,
        matchups: np.ndarray,
        outcomes: np.ndarray,
        tau: float = DEFAULT_TAU,
        **kwargs,
    ):
        """
        Build a period from arrays of matchups and outcomes.

        Parameters:
            players (list): Players, the entries of matchups index into this list.
            matchups (np.ndarray of shape (n,2)): Player indices of each match.
            outcomes (np.ndarray of shape (n,)): Result for the first player of each match, 1.0, 0.5 or 0.0.
            tau (float): The system constant.

        Returns:
            RatingPeriod: a period with every player registered, including those without matches
        """
        matchups = np.asarray(matchups)
        outcomes = np.asarray(outcomes, dtype=np.float64)
        if matchups.ndim != 2 or matchups.shape[1] != 2:
            raise InvalidConfiguration(f'matchups must have shape (n, 2), got {matchups.shape}')
        if outcomes.shape != (matchups.shape[0],):
            raise InvalidConfiguration(f'expected {matchups.shape[0]} outcomes, got shape {outcomes.shape}')
        if matchups.size and (matchups.min() < 0 or matchups.max() >= len(players)):
            raise InvalidConfiguration('matchups contain indices outside of the player list')

        period = cls(tau=tau, **kwargs)
        for player in players:
            period.add_player(player)
        for (idx_1, idx_2), outcome in zip(matchups, outcomes):
            period.add_match(players[idx_1], players[idx_2], outcome)
        return period

    @property
    def players(self) -> List[Player]:
        """registered players in order of first registration"""
        return list(self._players.values())

    def add_player(self, player: Player):
        """register a player, registering the same player again is a no-op"""
        self._players.setdefault(id(player), player)

    def add_match(self, player1: Player, player2: Player, score) -> Match:
        """record one game between player1 and player2, score is from player1's perspective"""
        if player1 is player2:
            raise InvalidConfiguration(f'{player1!r} cannot play against itself')
        try:
            score = MatchResult(score)
        except ValueError as err:
            raise InvalidConfiguration(f'unknown match outcome {score!r}, expected 1.0, 0.5 or 0.0') from err
        match = Match(player1, player2, score)
        self.register_match(match)
        return match

    def register_match(self, match: Match):
        """register a match built elsewhere, registering the same match again is a no-op"""
        if id(match) in self._match_ids:
            return
        if match.player1 is None or match.player2 is None:
            raise InvalidConfiguration(f'{match!r} refers to a player that no longer exists')
        if match.player1 is match.player2:
            raise InvalidConfiguration(f'{match.player1!r} cannot play against itself')
        self.add_player(match.player1)
        self.add_player(match.player2)
        match.player1.add_match(match)
        match.player2.add_match(match)
        self.matches.append(match)
        self._match_ids.add(id(match))

    def calculate(self):
        """
        Compute the post period state of every registered player.

        Players without matches have their deviation increased, everyone else gets the full
        Glicko 2 update. A failure for one player does not stop the others, once every player
        has been processed a NumericalNonConvergence listing the failures is raised.
        """
        failures = {}
        num_touched = 0
        for player in self._players.values():
            matches = [m for m in player.matches if id(m) in self._match_ids]
            if not matches:
                player.post = player.pre.touched()
                num_touched += 1
                continue
            opponents = [m.opponent_for(player) for m in matches]
            opp_mus = np.array([o.pre.rating for o in opponents])
            opp_phis = np.array([o.pre.deviation for o in opponents])
            scores = np.array([m.result_for(player) for m in matches])
            try:
                player.post = update_rating(
                    player.pre,
                    opp_mus,
                    opp_phis,
                    scores,
                    tau=self.tau,
                    epsilon=self.epsilon,
                    max_iter=self.max_iter,
                )
            except Glicko2Error as err:
                logger.warning('could not update %r: %s', player, err)
                player.post = None
                failures[player] = err

        logger.info(
            'calculated rating period: %d players, %d matches, %d without matches, %d failed',
            len(self._players),
            len(self.matches),
            num_touched,
            len(failures),
        )
        if failures:
            first = next(iter(failures.values()))
            raise NumericalNonConvergence(f'{len(failures)} player update(s) failed', failures=failures) from first

    def predict(self, player1: Player, player2: Player) -> float:
        """probability that player1 beats player2 based on their pre period states"""
        mu_diff = player1.pre.rating - player2.pre.rating
        combined_phi = math.sqrt(player1.pre.deviation**2.0 + player2.pre.deviation**2.0)
        return sigmoid_scalar(g_scalar(combined_phi) * mu_diff)

    def predict_matchups(self, matchups: np.ndarray) -> np.ndarray:
        """vectorized predict, matchups index into self.players"""
        players = self.players
        mus = np.array([p.pre.rating for p in players])
        phis = np.array([p.pre.deviation for p in players])
        matchups = np.asarray(matchups)
        mu_diff = mus[matchups[:, 0]] - mus[matchups[:, 1]]
        combined_phi = np.sqrt(np.square(phis[matchups[:, 0]]) + np.square(phis[matchups[:, 1]]))
        return sigmoid(g_vector(combined_phi) * mu_diff)

    def print_leaderboard(self, num_places=None):
        """print players ordered by rating - 3 * deviation on the public scale"""
        players = self.players
        states = [p.post if p.post is not None else p.pre for p in players]
        public = np.array([state.to_glicko()[:2] for state in states]).reshape(-1, 2)
        sort_array = public[:, 0] - (3.0 * public[:, 1])
        num_places = len(players) if num_places is None else min(num_places, len(players))
        sorted_idxs = np.argsort(-sort_array)[:num_places]
        names = [str(p.name) if p.name is not None else f'player {idx}' for idx, p in enumerate(players)]
        max_len = min(np.max([len(name) for name in names] + [10]), 25)
        print(f'{"competitor": <{max_len}}\t{"rating - (3*rd)"}\t')
        for idx in sorted_idxs:
            print(f'{names[idx]: <{max_len}}\t{sort_array[idx]:.6f}')
