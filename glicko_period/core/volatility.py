"""
Volatility update of Glicko 2 (step 5 of http://www.glicko.net/glicko/glicko2.pdf)

The new volatility is exp(A / 2) where A is the root of volatility_objective,
found with the Illinois variant of regula falsi.
"""
import logging
import math
from glicko_period.errors import NumericalNonConvergence
from glicko_period.utils.constants import EPSILON, MAX_ITER

logger = logging.getLogger(__name__)


def volatility_objective(x, delta2, phi2, v, a, tau2):
    """f(x) whose root in x = ln(sigma'^2) gives the new volatility"""
    ex = math.exp(x)
    phi2_v_ex = phi2 + v + ex
    num_1 = ex * (delta2 - phi2_v_ex)
    denom_1 = 2.0 * (phi2_v_ex**2.0)
    term_2 = (x - a) / tau2
    return (num_1 / denom_1) - term_2


def solve_volatility(delta, sigma, phi, v, tau, epsilon=EPSILON, max_iter=MAX_ITER):
    """
    Solve for the post period volatility of one competitor.

    Parameters:
        delta (float): estimated improvement, v times the sum of g(phi_j) * (s_j - E_j)
        sigma (float): pre period volatility
        phi (float): pre period deviation
        v (float): estimated variance of the rating based on game outcomes
        tau (float): system constant
        epsilon (float): convergence tolerance on the width of the bracket
        max_iter (int): maximum number of steps for both the bracket search and the iteration

    Returns:
        float: sigma prime

    Raises:
        NumericalNonConvergence: if either loop exceeds max_iter steps or the float arithmetic overflows
    """
    try:
        return _solve_volatility(delta, sigma, phi, v, tau, epsilon, max_iter)
    except (OverflowError, ZeroDivisionError, ValueError) as err:
        raise NumericalNonConvergence(
            f'volatility could not be computed (delta={delta}, sigma={sigma}, phi={phi}, v={v}, tau={tau}): {err}'
        ) from err


def _solve_volatility(delta, sigma, phi, v, tau, epsilon, max_iter):
    delta2 = delta**2.0
    phi2 = phi**2.0
    tau2 = tau**2.0
    A = a = math.log(sigma**2.0)

    def f(x):
        return volatility_objective(x, delta2, phi2, v, a, tau2)

    if delta2 > (phi2 + v):
        B = math.log(delta2 - phi2 - v)
    else:
        k = 1
        while f(a - k * tau) < 0:
            k += 1
            if k > max_iter:
                raise NumericalNonConvergence(
                    f'volatility bracket search found no sign change within {max_iter} steps '
                    f'(delta={delta}, sigma={sigma}, phi={phi}, v={v}, tau={tau})'
                )
        B = a - k * tau
        logger.debug('volatility bracket found after %d steps', k)

    f_A = f(A)
    f_B = f(B)
    iters = 0
    while math.fabs(B - A) > epsilon:
        if iters >= max_iter:
            raise NumericalNonConvergence(
                f'volatility iteration did not converge within {max_iter} steps '
                f'(delta={delta}, sigma={sigma}, phi={phi}, v={v}, tau={tau})'
            )
        C = A + ((A - B) * f_A) / (f_B - f_A)
        f_C = f(C)
        if f_C == 0.0:
            # landed exactly on the root
            A = B = C
            break
        if (f_C * f_B) < 0:
            A = B
            f_A = f_B
        else:
            f_A = f_A / 2.0
        B = C
        f_B = f_C
        iters += 1

    logger.debug('volatility converged after %d iterations', iters)
    return math.exp(A / 2.0)
