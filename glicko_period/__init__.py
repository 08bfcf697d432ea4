"""
glicko_period
=============

Glicko 2 ratings computed one rating period at a time.

Players are registered into a RatingPeriod together with the matches they played, a single
call to RatingPeriod.calculate then updates every player's post period rating from the pre
period ratings of the whole period. Ratings are kept on the internal Glicko 2 scale, Rating
converts to and from the public 1500 centered scale.
"""
from glicko_period.errors import Glicko2Error, InvalidConfiguration, NumericalNonConvergence
from glicko_period.models.rating import Rating
from glicko_period.models.match import Match, MatchResult
from glicko_period.models.player import Player
from glicko_period.core.period import RatingPeriod
from glicko_period.core.volatility import solve_volatility, volatility_objective

__all__ = [
    'Glicko2Error',
    'InvalidConfiguration',
    'NumericalNonConvergence',
    'Rating',
    'Match',
    'MatchResult',
    'Player',
    'RatingPeriod',
    'solve_volatility',
    'volatility_objective',
]
