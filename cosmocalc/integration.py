"""
Adaptive Simpson quadrature used by every distance and time integral.
"""

import logging
from typing import Callable

from .exceptions import IntegrationError

logger = logging.getLogger(__name__)


def _simpson(f_a: float, f_mid: float, f_b: float, width: float) -> float:
    return width * (f_a + 4.0 * f_mid + f_b) / 6.0


def adaptive_simpson(
    func: Callable[[float], float],
    lower: float,
    upper: float,
    min_h: float,
    tolerance: float,
) -> float:
    """
    Integrate ``func`` from ``lower`` to ``upper`` with adaptive Simpson quadrature.

    Each interval is compared against the sum of its two halves. When the two
    estimates agree to within ``15 * tolerance`` the refined estimate is accepted
    with its Richardson correction, otherwise both halves are refined with half
    the tolerance each.

    Parameters
    ----------
    func : callable
        Integrand taking and returning a float.
    lower, upper : float
        Integration limits. ``upper < lower`` returns the negated integral.
    min_h : float
        Narrowest subinterval that may be produced.
    tolerance : float
        Absolute error tolerance for the whole integral.

    Returns
    -------
    float
        The integral estimate.

    Raises
    ------
    IntegrationError
        If a subinterval narrower than ``min_h`` would be needed to meet the tolerance.
    """
    if upper < lower:
        return -adaptive_simpson(func, upper, lower, min_h, tolerance)

    if upper - lower < min_h:
        raise IntegrationError(
            f"Interval [{lower}, {upper}] is narrower than the minimum step {min_h}.",
            lower, upper, min_h, tolerance,
        )

    f_lower = func(lower)
    f_upper = func(upper)
    f_mid = func(0.5 * (lower + upper))
    whole = _simpson(f_lower, f_mid, f_upper, upper - lower)

    # Work list of (a, b, f(a), f(mid), f(b), simpson estimate, tolerance).
    pending = [(lower, upper, f_lower, f_mid, f_upper, whole, tolerance)]
    total = 0.0
    while pending:
        a, b, f_a, f_m, f_b, estimate, tol = pending.pop()
        width = b - a
        mid = 0.5 * (a + b)
        half = 0.5 * width
        f_left = func(0.5 * (a + mid))
        f_right = func(0.5 * (mid + b))
        left = _simpson(f_a, f_left, f_m, half)
        right = _simpson(f_m, f_right, f_b, half)
        delta = left + right - estimate

        if abs(delta) <= 15.0 * tol:
            total += left + right + delta / 15.0
        elif half < min_h:
            logger.debug(
                "Simpson refinement of [%g, %g] hit the minimum step %g (tolerance %g).",
                a, b, min_h, tol,
            )
            raise IntegrationError(
                f"Failed to reach tolerance {tolerance} on [{lower}, {upper}]: "
                f"subinterval [{a}, {b}] cannot be split below the minimum step {min_h}.",
                lower, upper, min_h, tolerance,
            )
        else:
            pending.append((mid, b, f_m, f_right, f_b, right, 0.5 * tol))
            pending.append((a, mid, f_a, f_left, f_m, left, 0.5 * tol))

    return total
