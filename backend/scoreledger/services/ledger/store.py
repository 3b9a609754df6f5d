"""Player score store: the durable player -> best handle map.

``submit`` is the only writer. It retargets the player's pointer and
grants decryption on the new handle inside one database transaction, so
a stored handle is never visible without a grant for its player.
"""
from contextlib import contextmanager
from typing import Optional

from scoreledger import db
from scoreledger.errors import NotSubmitted
from scoreledger.models import PlayerRecord
from .access import grant
from .comparator import select_max
from .registry import register_handle


@contextmanager
def _transaction():
    try:
        yield
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def _record_for(player: str) -> Optional[PlayerRecord]:
    return PlayerRecord.query.filter_by(player=player).first()


def submit(player: str, new_handle: str, ledger: Optional[str] = None, oracle=None) -> PlayerRecord:
    """Fold ``new_handle`` into the player's best and grant access to the result.

    ``ledger``, when given, is granted alongside the player so the ledger
    can keep computing on its own stored value.
    """
    with _transaction():
        record = _record_for(player)
        current = record.best_handle if record else None
        best = select_max(current, new_handle, oracle=oracle)
        if record is None:
            record = PlayerRecord(player=player, submissions=0)
        # The candidate is tracked too, so pruning can reclaim it once superseded
        candidate_entry = register_handle(new_handle)
        record.best = candidate_entry if best == new_handle else register_handle(best)
        record.submissions = (record.submissions or 0) + 1
        db.session.add(record)
        grant(best, player)
        if ledger and ledger != player:
            grant(best, ledger)
    return record


def get_best(player: str) -> str:
    record = _record_for(player)
    if record is None or record.best_handle is None:
        raise NotSubmitted()
    return record.best_handle


def has_submitted(player: str) -> bool:
    return _record_for(player) is not None
