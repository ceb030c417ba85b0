"""
Fibonacci Engine
----------------
Iterative F(n) over Python ints, which never overflow:

  F(0) = 0, F(1) = 1, F(k) = F(k-1) + F(k-2)

Only the last two values are kept alive.
"""


def fibonacci(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1

    a, b = 0, 1
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b
