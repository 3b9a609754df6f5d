"""Capability interface to the external cryptographic subsystem.

The ledger only ever holds handles. Ciphertexts, proofs and plaintexts
live behind a ``CryptoOracle``; ``MockOracle`` is an in-process stand-in
used for development and tests.
"""

from .oracle import CryptoOracle, EUINT32, EBOOL, UINT32_MAX, is_handle, get_oracle
from .mock import MockOracle

__all__ = [
    'CryptoOracle',
    'MockOracle',
    'EUINT32',
    'EBOOL',
    'UINT32_MAX',
    'is_handle',
    'get_oracle',
]
