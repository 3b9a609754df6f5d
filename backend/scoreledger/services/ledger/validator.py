from typing import NamedTuple

from scoreledger.crypto import get_oracle, is_handle
from scoreledger.errors import MalformedProof, ProofMismatch, OracleError


class AcceptedCiphertext(NamedTuple):
    handle: str
    submitter: str
    ledger: str


def validate(handle: str, proof: str, submitter: str, ledger: str, oracle=None) -> AcceptedCiphertext:
    """Check that ``proof`` binds ``handle`` to ``(submitter, ledger)``.

    Pure verification: touches no ledger state. Raises ``MalformedProof``
    for structurally bad or expired input and ``ProofMismatch`` when the
    proof was produced for another handle, submitter or ledger.
    """
    if not is_handle(handle):
        raise MalformedProof('Ciphertext handle is malformed')
    if not proof or not isinstance(proof, str):
        raise MalformedProof('Input proof is missing')
    if not submitter:
        raise ProofMismatch('Submission has no submitter identity')
    oracle = oracle or get_oracle()
    try:
        oracle.verify_proof(handle, proof, submitter, ledger)
    except OracleError as exc:
        raise MalformedProof(str(exc)) from exc
    return AcceptedCiphertext(handle, submitter, ledger)
