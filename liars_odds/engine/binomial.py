"""
Liar's Odds - Distribution Helpers

Binomial and Poisson building blocks, computed in log space so that
coefficients for 40 dice never overflow.
"""

import math


def log_binomial_coefficient(n: int, k: int) -> float:
    """
    Natural log of C(n, k).

    Sums log(n - i) - log(i + 1) over the smaller of k and n - k.

    Returns:
        log C(n, k), or -inf when k is outside [0, n]
    """
    if k < 0 or k > n:
        return -math.inf
    k = min(k, n - k)
    result = 0.0
    for i in range(k):
        result += math.log(n - i) - math.log(i + 1)
    return result


def binomial_coefficient(n: int, k: int) -> float:
    """C(n, k) as a float (0.0 when k is outside [0, n])."""
    if k < 0 or k > n:
        return 0.0
    return math.exp(log_binomial_coefficient(n, k))


def binomial_tail(k: int, n: int, p: float) -> float:
    """
    Upper tail of a binomial distribution.

    P(X >= k) = sum over x = k..n of C(n, x) * p^x * (1 - p)^(n - x)

    Args:
        k: Minimum number of successes
        n: Number of trials
        p: Success probability per trial

    Returns:
        The tail probability clamped to at most 1.0, or 0.0 for k
        outside [0, n]
    """
    if n < 0 or k < 0 or k > n:
        return 0.0
    total = 0.0
    for x in range(k, n + 1):
        total += binomial_coefficient(n, x) * p ** x * (1.0 - p) ** (n - x)
    return min(total, 1.0)


def log_factorial(n: int) -> float:
    """Natural log of n! (0.0 for n <= 1)."""
    result = 0.0
    for i in range(2, n + 1):
        result += math.log(i)
    return result


def poisson_pmf(j: int, rate: float) -> float:
    """P(Y = j) for Y ~ Poisson(rate)."""
    if j < 0:
        return 0.0
    if rate <= 0:
        return 1.0 if j == 0 else 0.0
    return math.exp(-rate + j * math.log(rate) - log_factorial(j))


def poisson_tail(k: int, upper: int, rate: float) -> float:
    """Poisson mass on [k, upper], i.e. P(k <= Y <= upper)."""
    total = 0.0
    for j in range(max(k, 0), upper + 1):
        total += poisson_pmf(j, rate)
    return total
