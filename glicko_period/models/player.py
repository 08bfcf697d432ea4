"""Players taking part in a rating period"""
from typing import List, Optional, Set
from glicko_period.errors import InvalidConfiguration
from glicko_period.models.match import Match
from glicko_period.models.rating import Rating
from glicko_period.utils.constants import DEFAULT_RATING, DEFAULT_RD, DEFAULT_VOLATILITY


class Player:
    """
    A competitor with its pre period rating, its post period rating and the matches it played.

    Players compare by identity, two players with equal ratings are still different competitors.
    """

    def __init__(self, pre: Optional[Rating] = None, name: Optional[str] = None):
        pre = pre if pre is not None else Rating()
        if not pre.is_valid():
            raise InvalidConfiguration(
                f'pre period state must have finite values with positive deviation and volatility, got {pre}'
            )
        self.name = name
        self.pre = pre
        self.post: Optional[Rating] = None
        self.matches: List[Match] = []
        # ids stay unique since self.matches keeps every match alive
        self._match_ids: Set[int] = set()

    @classmethod
    def from_glicko(
        cls,
        rating: float = DEFAULT_RATING,
        rd: float = DEFAULT_RD,
        volatility: float = DEFAULT_VOLATILITY,
        name: Optional[str] = None,
    ):
        """build a player from a rating on the public 1500 centered scale"""
        return cls(Rating.from_glicko(rating, rd, volatility), name=name)

    def add_match(self, match: Match):
        """append a match, adding the same match object twice is a no-op"""
        if id(match) in self._match_ids:
            return
        self.matches.append(match)
        self._match_ids.add(id(match))

    def carry_forward(self):
        """a fresh player for the next period whose pre period state is this player's post period state"""
        if self.post is None:
            raise InvalidConfiguration(f'{self!r} has not been calculated yet')
        return Player(self.post, name=self.name)

    def __repr__(self):
        if self.name is not None:
            return f'Player({self.name!r})'
        return f'Player(pre={self.pre})'
