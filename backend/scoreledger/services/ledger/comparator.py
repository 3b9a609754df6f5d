from typing import Optional

from scoreledger.crypto import get_oracle, is_handle
from scoreledger.errors import ComparisonFailed, OracleError


def select_max(current: Optional[str], candidate: str, oracle=None) -> str:
    """Handle to the encrypted max of ``current`` and ``candidate``.

    With no current best the candidate is taken as is. Otherwise the
    oracle computes ``candidate > current`` and muxes on it; both operands
    always go through the same two calls and the result is a fresh handle
    whichever side won, ties included.
    """
    if current is None:
        return candidate
    oracle = oracle or get_oracle()
    try:
        is_higher = oracle.gt(candidate, current)
        result = oracle.select(is_higher, candidate, current)
    except OracleError as exc:
        raise ComparisonFailed(f'Encrypted comparison failed: {exc}') from exc
    if not is_handle(result):
        raise ComparisonFailed('Oracle returned an invalid handle')
    return result
