"""In-process oracle modelled on an FHE coprocessor running in mock mode.

Encrypted uint32 values are kept in the ``mock_ciphertext`` table so
stored handles stay valid across restarts. Encrypted booleans only live
between ``gt`` and the ``select`` that consumes them. Input proofs are
timestamped itsdangerous tokens binding (handle, submitter, ledger).
"""
import secrets
import threading
from typing import Dict, Tuple

from itsdangerous import URLSafeTimedSerializer, BadSignature, BadPayload, SignatureExpired

from scoreledger import db
from scoreledger.errors import OracleError, ProofMismatch, MalformedProof
from scoreledger.models import MockCiphertext
from .oracle import CryptoOracle, EUINT32, EBOOL, UINT32_MAX, is_handle


class DecryptionDenied(OracleError):
    pass


class MockOracle(CryptoOracle):

    def __init__(self, secret_key: str = None, max_age: int = 300):
        self._secret_key = secret_key
        self.max_age = max_age
        self._serializer = None
        self._conditions: Dict[str, int] = {}
        self._lock = threading.Lock()
        if secret_key:
            self._serializer = URLSafeTimedSerializer(secret_key, salt='input-proof')

    def init_app(self, app):
        if not self._secret_key:
            self._secret_key = app.config['ORACLE_SECRET']
            self._serializer = URLSafeTimedSerializer(self._secret_key, salt='input-proof')
        self.max_age = int(app.config.get('PROOF_MAX_AGE_SEC', self.max_age))
        super().init_app(app)

    # ---- ciphertext table ----

    def _new_handle(self, kind: str, value: int) -> str:
        handle = '0x' + secrets.token_hex(32)
        if kind == EBOOL:
            with self._lock:
                self._conditions[handle] = value
        else:
            # Joins the caller's transaction
            db.session.add(MockCiphertext(handle=handle, kind=kind, value=value))
        return handle

    def _take_condition(self, handle: str) -> int:
        with self._lock:
            value = self._conditions.pop(handle, None)
        if value is None:
            raise OracleError(f'Unknown or already consumed condition {handle!r}')
        return value

    def _load(self, handle: str, kind: str = EUINT32) -> int:
        entry = db.session.get(MockCiphertext, handle) if is_handle(handle) else None
        if entry is None:
            raise OracleError(f'Unknown ciphertext handle {handle!r}')
        if entry.kind != kind:
            raise OracleError(f'Handle {handle} is {entry.kind}, expected {kind}')
        return entry.value

    def release(self, handles):
        if not handles:
            return 0
        return MockCiphertext.query.filter(MockCiphertext.handle.in_(list(handles))).delete(
            synchronize_session=False
        )

    # ---- client side ----

    def encrypt_input(self, ledger: str, submitter: str, value: int) -> Tuple[str, str]:
        """Encrypt a uint32 for ``submitter`` on ``ledger`` and produce its input proof."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= UINT32_MAX:
            raise ValueError('value must be an unsigned 32-bit integer')
        handle = self._new_handle(EUINT32, value)
        db.session.commit()
        proof = self._serializer.dumps({'h': handle, 's': submitter, 'l': ledger})
        return handle, proof

    # ---- ledger side ----

    def verify_proof(self, handle, proof, submitter, ledger):
        if not isinstance(proof, str) or proof.count('.') < 2:
            raise MalformedProof()
        try:
            payload = self._serializer.loads(proof, max_age=self.max_age)
        except SignatureExpired:
            raise MalformedProof('Proof has expired')
        except BadPayload:
            raise MalformedProof()
        except BadSignature:
            raise ProofMismatch()
        if not isinstance(payload, dict):
            raise MalformedProof()
        if (payload.get('h'), payload.get('s'), payload.get('l')) != (handle, submitter, ledger):
            raise ProofMismatch()
        # The handle must name an input this oracle actually produced
        self._load(handle, EUINT32)

    def gt(self, lhs, rhs):
        a = self._load(lhs, EUINT32)
        b = self._load(rhs, EUINT32)
        return self._new_handle(EBOOL, int(a > b))

    def select(self, cond, if_true, if_false):
        c = self._take_condition(cond)
        a = self._load(if_true, EUINT32)
        b = self._load(if_false, EUINT32)
        # Arithmetic mux: both operands always contribute
        return self._new_handle(EUINT32, a * c + b * (1 - c))

    def decrypt_for(self, identity, handle, is_authorized):
        if not is_handle(handle):
            raise OracleError(f'Not a ciphertext handle: {handle!r}')
        if not is_authorized(handle, identity):
            raise DecryptionDenied(f'{identity} may not decrypt {handle}')
        return self._load(handle, EUINT32)

    def pending_conditions(self) -> int:
        with self._lock:
            return len(self._conditions)
