"""Sum of the distinct multiples of some divisors below a limit."""


def sum_multiples(limit: int, *args: int) -> int:
    """Return the sum of every distinct multiple of args below limit.

    A divisor of zero contributes nothing.
    """
    multiples = {
        multiple
        for divisor in args
        if divisor > 0
        for multiple in range(0, limit, divisor)
    }
    return sum(multiples)