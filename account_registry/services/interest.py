def calculate_interest(balance: float, rate: float) -> float:
    """Return ``balance * rate`` with no rounding or validation.

    Negative inputs give negative interest, and non-finite inputs propagate
    as usual for floats (``nan`` in, ``nan`` out).

    >>> calculate_interest(1000, 0.05)
    50.0
    """
    return balance * rate
