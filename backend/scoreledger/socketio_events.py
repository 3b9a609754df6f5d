from flask_socketio import join_room, leave_room, emit
from flask_login import current_user


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def _own_room(data):
    """Room for ``data['player']`` if it is the logged-in user, else None."""
    player = (data or {}).get('player')
    if not player:
        emit('error', {'message': 'player is required'})
        return None
    if not current_user.is_authenticated or current_user.identity != player:
        emit('error', {'message': 'You may only follow your own scores'})
        return None
    return f"player:{player}"


def handle_join_player(data):
    room = _own_room(data)
    if room is None:
        return
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_player(data):
    room = _own_room(data)
    if room is None:
        return
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    from scoreledger import socketio

    handlers = {
        'connect': handle_connect,
        'join_player': handle_join_player,
        'leave_player': handle_leave_player,
        'ping': handle_ping,
    }
    for event, handler in handlers.items():
        socketio.on_event(event, handler, namespace='/ws')
    if testing:
        # Test-only mirror on default namespace
        for event, handler in handlers.items():
            socketio.on_event(event, handler, namespace='/')
