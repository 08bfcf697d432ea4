"""Rating state on the internal Glicko-2 scale"""
import math
from dataclasses import dataclass
from glicko_period.utils.constants import GLICKO2_SCALE, DEFAULT_RATING, DEFAULT_RD, DEFAULT_VOLATILITY


@dataclass(frozen=True)
class Rating:
    """
    The (rating, deviation, volatility) triple of one competitor at one point in time.

    Attributes:
        rating (float): mu, the skill estimate on the internal logistic scale, 0.0 is average.
        deviation (float): phi, the uncertainty of the rating on the internal scale.
        volatility (float): sigma, the expected fluctuation of the rating over time.
    """

    rating: float = 0.0
    deviation: float = DEFAULT_RD / GLICKO2_SCALE
    volatility: float = DEFAULT_VOLATILITY

    @classmethod
    def from_glicko(
        cls,
        rating: float = DEFAULT_RATING,
        rd: float = DEFAULT_RD,
        volatility: float = DEFAULT_VOLATILITY,
    ):
        """build a rating state from the public 1500 centered scale"""
        return cls(
            rating=(rating - DEFAULT_RATING) / GLICKO2_SCALE,
            deviation=rd / GLICKO2_SCALE,
            volatility=volatility,
        )

    def to_glicko(self):
        """returns (rating, rd, volatility) on the public 1500 centered scale"""
        return (
            (self.rating * GLICKO2_SCALE) + DEFAULT_RATING,
            self.deviation * GLICKO2_SCALE,
            self.volatility,
        )

    def touched(self):
        """the state of a competitor who sat out the period, only the deviation grows"""
        return Rating(
            rating=self.rating,
            deviation=math.sqrt(self.deviation**2.0 + self.volatility**2.0),
            volatility=self.volatility,
        )

    def is_valid(self):
        values = (self.rating, self.deviation, self.volatility)
        if not all(math.isfinite(x) for x in values):
            return False
        # the squares feed logs and divisions, they must not underflow or overflow
        squares = (self.deviation * self.deviation, self.volatility * self.volatility)
        return self.deviation > 0.0 and self.volatility > 0.0 and all(0.0 < x < math.inf for x in squares)
