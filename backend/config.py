import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///ledger.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Identity every input proof must be bound to
    LEDGER_IDENTITY = os.environ.get('LEDGER_IDENTITY', 'scoreledger')
    # Signing key of the in-process mock oracle
    ORACLE_SECRET = os.environ.get('ORACLE_SECRET') or 'mock-oracle-secret'
    # Proofs older than this (seconds) are treated as expired
    PROOF_MAX_AGE_SEC = int(os.environ.get('PROOF_MAX_AGE_SEC', '300'))
    # Mount /api/oracle encrypt/decrypt endpoints backed by the mock oracle
    ENABLE_MOCK_ORACLE_API = os.environ.get('ENABLE_MOCK_ORACLE_API', '1') not in ('0', 'false', 'False')
    # Optional: background pruning of stale access grants (sec). 0 disables.
    GRANT_PRUNE_INTERVAL_SEC = int(os.environ.get('GRANT_PRUNE_INTERVAL_SEC', '0'))
