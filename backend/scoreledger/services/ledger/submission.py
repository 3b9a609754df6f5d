from flask import current_app

from scoreledger import socketio
from scoreledger.errors import LedgerError
from .validator import validate
from .store import submit
from .registry import write_lock


def submit_fly_score(submitter: str, handle: str, proof: str, oracle=None):
    """Validate, fold into the submitter's best, grant, commit.

    Either the whole submission is applied or nothing is. Raises the
    ``LedgerError`` subclass that caused the rejection.
    """
    ledger = current_app.config['LEDGER_IDENTITY']
    with write_lock:
        try:
            accepted = validate(handle, proof, submitter, ledger, oracle=oracle)
            record = submit(accepted.submitter, accepted.handle, ledger=ledger, oracle=oracle)
        except LedgerError as exc:
            current_app.logger.info(f"[submit-rejected] player={submitter} code={exc.code}")
            raise
    current_app.logger.info(
        f"[submit] player={record.player} handle={record.best_handle} submissions={record.submissions}"
    )
    # Sent on every accepted submission, so its presence says nothing about who won
    socketio.emit('best_updated', {'player': record.player, 'handle': record.best_handle},
                  to=f"player:{record.player}", namespace='/ws')
    return record
