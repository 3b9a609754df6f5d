import re

from flask import current_app

EUINT32 = 'euint32'
EBOOL = 'ebool'
UINT32_MAX = 2 ** 32 - 1

_HANDLE_RE = re.compile(r'^0x[0-9a-f]{64}$')


def is_handle(value) -> bool:
    """True when ``value`` looks like a ciphertext handle (0x + 32 bytes hex)."""
    return isinstance(value, str) and bool(_HANDLE_RE.match(value))


def get_oracle():
    """Return the oracle bound to the current application."""
    return current_app.extensions['crypto_oracle']


class CryptoOracle:
    """Operations the ledger consumes from the cryptographic subsystem.

    All calls are synchronous and bounded. Implementations raise
    ``OracleError`` when they cannot evaluate a request; ``verify_proof``
    raises ``ProofMismatch`` or ``MalformedProof`` directly.
    """

    def init_app(self, app):
        app.extensions['crypto_oracle'] = self

    def verify_proof(self, handle: str, proof: str, submitter: str, ledger: str) -> None:
        raise NotImplementedError

    def gt(self, lhs: str, rhs: str) -> str:
        """Encrypted ``lhs > rhs``; returns an ebool handle."""
        raise NotImplementedError

    def select(self, cond: str, if_true: str, if_false: str) -> str:
        """Encrypted conditional select (cmux); returns a fresh euint32 handle."""
        raise NotImplementedError

    def decrypt_for(self, identity: str, handle: str, is_authorized) -> int:
        """Decrypt ``handle`` for ``identity`` if ``is_authorized(handle, identity)``."""
        raise NotImplementedError

    def release(self, handles) -> int:
        """Hint that ``handles`` are no longer reachable from the ledger."""
        return 0
