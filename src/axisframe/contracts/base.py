"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
It enforces structural invariants of coordinates, storages and variables.
"""

from axisframe.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a structural contract.

    Called wherever a caller-supplied argument or a freshly recomputed
    shape must satisfy an invariant. It is fail-fast: no recovery,
    no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ContractViolation is raised.

    message : str
        Error message explaining the contract violation (for debugging).

    Raises
    ------
    ContractViolation
        If condition is False. This indicates a bug in the calling code.

    Examples
    --------
    >>> require(step > 0, "Slice contract: step must be positive")
    >>> require(len(positions) == var.dimension(), "Variable contract: arity")
    """
    if not condition:
        raise ContractViolation(message)
