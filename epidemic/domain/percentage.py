from epidemic.domain.errors import ArithmeticDomainError


def percent_of(part: int, total: int, label: str = "value") -> int:
    """
    Integer percentage ``part * 100 / total`` truncated toward zero.

    Raises ArithmeticDomainError instead of dividing by a zero total.
    """
    if total == 0:
        raise ArithmeticDomainError(f"cannot compute percentage of {label}: total is 0")
    quotient = abs(part * 100) // abs(total)
    return quotient if (part >= 0) == (total > 0) else -quotient
