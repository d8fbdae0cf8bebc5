"""
Combinatorics — биномиальные коэффициенты произвольной точности

Используется генератором Pascal/offset матрицы (Taylor shift).
"""


def binomial(n: int, k: int) -> int:
    """
    Биномиальный коэффициент C(n, k) на Python int.

    Алгоритм: симметрия k ← min(k, n-k), затем мультипликативная рекуррентность
    res = res * (n-i+1) // i для i=1..k. На каждом шаге res == C(n, i),
    поэтому целочисленное деление всегда точное.

    Args:
        n: Неотрицательное целое
        k: Индекс (вне [0, n] → 0)

    Returns:
        C(n, k)

    Raises:
        ValueError: Если n < 0

    Examples:
        >>> binomial(5, 2)
        10
        >>> binomial(5, 7)
        0
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if k < 0 or k > n:
        return 0
    if k == 0 or k == n:
        return 1

    k = min(k, n - k)

    res = 1
    for i in range(1, k + 1):
        res = res * (n - i + 1) // i
    return res
