from scoreledger import db
from scoreledger.crypto import get_oracle
from scoreledger.models import AccessGrant, CiphertextHandle
from .registry import write_lock, stale_handles


def grant(handle: str, grantee: str) -> AccessGrant:
    """Allow ``grantee`` to request decryption of ``handle``.

    Joins the caller's transaction; never commits on its own.
    """
    existing = AccessGrant.query.filter_by(handle=handle, grantee=grantee).first()
    if existing:
        return existing
    access_grant = AccessGrant(handle=handle, grantee=grantee)
    db.session.add(access_grant)
    return access_grant


def is_authorized(handle: str, identity: str) -> bool:
    if not handle or not identity:
        return False
    return AccessGrant.query.filter_by(handle=handle, grantee=identity).first() is not None


def grantees(handle: str):
    return sorted(g.grantee for g in AccessGrant.query.filter_by(handle=handle).all())


def prune_stale_grants(oracle=None) -> int:
    """Delete grants on handles no PlayerRecord points at. Returns the count.

    The stale handles leave the registry too, and the oracle is told it
    may free their ciphertexts.
    """
    oracle = oracle or get_oracle()
    with write_lock:
        try:
            stale = stale_handles()
            if not stale:
                return 0
            removed = AccessGrant.query.filter(AccessGrant.handle.in_(stale)).delete(synchronize_session=False)
            CiphertextHandle.query.filter(CiphertextHandle.handle.in_(stale)).delete(synchronize_session=False)
            oracle.release(stale)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
    return removed
