"""Ledger domain services: validation, encrypted select, store, grants.

HTTP routes and socket handlers import from here, keeping transport
concerns separate from the confidential best-score logic.
"""

from .validator import AcceptedCiphertext, validate
from .comparator import select_max
from .store import submit, get_best, has_submitted
from .access import grant, is_authorized, prune_stale_grants
from .submission import submit_fly_score

__all__ = [
    'AcceptedCiphertext',
    'validate',
    'select_max',
    'submit',
    'get_best',
    'has_submitted',
    'grant',
    'is_authorized',
    'prune_stale_grants',
    'submit_fly_score',
]
