"""Match records for one rating period"""
import weakref
from enum import Enum


class MatchResult(float, Enum):
    """outcome of a match from the perspective of player1"""

    WIN = 1.0
    DRAW = 0.5
    LOSS = 0.0


class Match:
    """
    An immutable record of one game between two players within a rating period.

    Players are held through weak references, the rating period owns the players
    and each player owns its list of matches.
    """

    __slots__ = ('_player1', '_player2', '_score')

    def __init__(self, player1, player2, score: MatchResult):
        object.__setattr__(self, '_player1', weakref.ref(player1))
        object.__setattr__(self, '_player2', weakref.ref(player2))
        object.__setattr__(self, '_score', MatchResult(score))

    def __setattr__(self, name, value):
        raise AttributeError('Match is immutable')

    @property
    def player1(self):
        return self._player1()

    @property
    def player2(self):
        return self._player2()

    @property
    def score(self) -> MatchResult:
        return self._score

    def result_for(self, player) -> float:
        """the score of the match from the perspective of player"""
        if player is self.player1:
            return float(self._score)
        if player is self.player2:
            return 1.0 - float(self._score)
        raise ValueError(f'{player!r} did not play in {self!r}')

    def opponent_for(self, player):
        if player is self.player1:
            return self.player2
        if player is self.player2:
            return self.player1
        raise ValueError(f'{player!r} did not play in {self!r}')

    def __repr__(self):
        return f'Match({self.player1!r}, {self.player2!r}, {self._score.name})'
