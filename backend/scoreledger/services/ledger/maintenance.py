import time

from scoreledger import socketio
from .access import prune_stale_grants


_pruner_started = set()


def schedule_grant_pruning(app) -> None:
    """Start the background stale-grant pruner for ``app``.

    - No-ops in TESTING mode or when GRANT_PRUNE_INTERVAL_SEC is 0
    - Ensures a single pruner per application
    - Pruning only removes grants on handles no player points at
    """
    if app.config.get('TESTING'):
        return
    try:
        interval = int(app.config.get('GRANT_PRUNE_INTERVAL_SEC', 0))
    except Exception:
        interval = 0
    if interval <= 0 or id(app) in _pruner_started:
        return
    _pruner_started.add(id(app))
    app.logger.info(f"[prune-set] interval={interval}s")

    def _worker(delay: int):
        while True:
            time.sleep(delay)
            with app.app_context():
                try:
                    removed = prune_stale_grants()
                except Exception as exc:
                    app.logger.warning(f"[prune-error] {exc}")
                    continue
                if removed:
                    app.logger.info(f"[prune] removed={removed} stale grants")

    socketio.start_background_task(_worker, interval)
