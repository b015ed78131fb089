class InvalidFormat(ValueError):
    """A card or hand token that does not follow the <rank><suit> grammar."""

    pass


class ContractViolation(RuntimeError):
    """An internal invariant was broken. This is a bug, not bad input."""

    pass
