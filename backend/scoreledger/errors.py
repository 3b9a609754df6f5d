"""Error taxonomy surfaced by the ledger.

Every failure carries a stable ``code`` so callers can tell a bad
encryption/proof apart from a comparison the ledger could not complete.
"""


class LedgerError(Exception):
    code = 'ledger_error'
    status = 500
    default_message = 'Ledger error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {'error': self.message, 'code': self.code}


class ValidationError(LedgerError):
    code = 'validation_error'
    status = 400
    default_message = 'Submission rejected'


class ProofMismatch(ValidationError):
    code = 'proof_mismatch'
    status = 403
    default_message = 'Proof does not bind the ciphertext to this submitter and ledger'


class MalformedProof(ValidationError):
    code = 'malformed_proof'
    status = 400
    default_message = 'Proof is malformed or expired'


class ComparisonFailed(LedgerError):
    code = 'comparison_failed'
    status = 502
    default_message = 'Encrypted comparison failed'


class NotSubmitted(LedgerError):
    code = 'not_submitted'
    status = 404
    default_message = 'Player has not submitted any score'


class OracleError(Exception):
    """Raised by the cryptographic oracle when it cannot evaluate a request."""
