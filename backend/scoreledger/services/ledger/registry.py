import threading

from scoreledger import db
from scoreledger.crypto import EUINT32
from scoreledger.models import CiphertextHandle, PlayerRecord


# Serializes every writer of ledger state: submissions and pruning
write_lock = threading.Lock()


def register_handle(handle: str, kind: str = EUINT32) -> CiphertextHandle:
    """Record ``handle`` in the registry if it is not there yet."""
    entry = db.session.get(CiphertextHandle, handle)
    if entry is None:
        entry = CiphertextHandle(handle=handle, kind=kind)
        db.session.add(entry)
    return entry


def live_handles():
    return db.select(PlayerRecord.best_handle).where(PlayerRecord.best_handle.is_not(None))


def stale_handles():
    """Registered handles no PlayerRecord points at."""
    rows = CiphertextHandle.query.filter(CiphertextHandle.handle.not_in(live_handles())).all()
    return [row.handle for row in rows]
