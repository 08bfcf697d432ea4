"""
Glicko 2 update of a single competitor over one rating period
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

All functions here work on pre period values only, opponents are passed as arrays
of their pre period ratings and deviations.
"""
import math
import numpy as np
from glicko_period.errors import NumericalNonConvergence
from glicko_period.models.rating import Rating
from glicko_period.core.volatility import solve_volatility
from glicko_period.utils.constants import THREE_OVER_PI_SQUARED, EPSILON, MAX_ITER
from glicko_period.utils.math_utils import sigmoid


def g_scalar(phi):
    """this is DIFFERENT from g in regular Glicko"""
    return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi**2.0)))


def g_vector(phi):
    """vector version"""
    return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))


def expected_score(mu, opp_mus, opp_phis):
    """probability of the competitor beating each opponent"""
    return sigmoid(g_vector(opp_phis) * (mu - np.asarray(opp_mus)))


def estimated_variance(gs, probs):
    """v, the estimated variance of the competitor's rating based only on game outcomes (step 3)"""
    info = float(np.sum(np.square(gs) * probs * (1.0 - probs)))
    if not (info > 0.0 and math.isfinite(info)):
        raise NumericalNonConvergence(f'estimated variance is degenerate, sum of information terms is {info}')
    return 1.0 / info


def outcome_delta(gs, probs, scores):
    """sum of g(phi_j) * (s_j - E_j), the outcome based rating change before scaling by v (step 4)"""
    return float(np.sum(gs * (np.asarray(scores, dtype=np.float64) - probs)))


def update_rating(pre: Rating, opp_mus, opp_phis, scores, tau, epsilon=EPSILON, max_iter=MAX_ITER) -> Rating:
    """
    Compute the post period state of one competitor.

    Parameters:
        pre (Rating): the competitor's pre period state
        opp_mus (array-like): pre period ratings of the opponents, one entry per match
        opp_phis (array-like): pre period deviations of the opponents, one entry per match
        scores (array-like): outcomes from the competitor's perspective, 1.0, 0.5 or 0.0
        tau (float): system constant
        epsilon (float): tolerance of the volatility root-finder
        max_iter (int): iteration cap of the volatility root-finder

    Returns:
        Rating: the post period state
    """
    opp_mus = np.asarray(opp_mus, dtype=np.float64)
    opp_phis = np.asarray(opp_phis, dtype=np.float64)
    if opp_mus.shape[0] == 0:
        return pre.touched()

    gs = g_vector(opp_phis)
    probs = sigmoid(gs * (pre.rating - opp_mus))
    v = estimated_variance(gs, probs)
    grad = outcome_delta(gs, probs, scores)
    delta = v * grad
    if not (math.isfinite(delta) and math.isfinite(delta * delta)):
        raise NumericalNonConvergence(f'estimated improvement {delta} is too large (v={v})')

    sigma_prime = solve_volatility(delta, pre.volatility, pre.deviation, v, tau, epsilon=epsilon, max_iter=max_iter)
    phi_star = math.sqrt(pre.deviation**2.0 + sigma_prime**2.0)
    phi_prime = 1.0 / math.sqrt((1.0 / phi_star**2.0) + (1.0 / v))
    # step 7 scales the unscaled sum, not delta
    mu_prime = pre.rating + (phi_prime**2.0) * grad

    post = Rating(rating=mu_prime, deviation=phi_prime, volatility=sigma_prime)
    if not post.is_valid():
        raise NumericalNonConvergence(f'update produced a non finite state {post}')
    return post
