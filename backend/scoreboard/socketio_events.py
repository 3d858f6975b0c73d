from flask_socketio import emit
from flask import current_app, request
from scoreboard.errors import ScoreboardError
from scoreboard.identity import find_verified_user
from scoreboard.services.games import Listener, ScoreRelay


def _relay() -> ScoreRelay:
    return current_app.extensions['score_relay']


def _listener() -> Listener:
    # type: ignore: request.sid and request.namespace exist in Socket.IO context
    return Listener(request.sid, request.namespace)  # type: ignore


def _emit_error(exc: ScoreboardError) -> None:
    current_app.logger.info(f"[error] sid={_listener().sid} {exc.code}: {exc}")
    emit('error', exc.to_dict())


def handle_connect(auth=None):
    user = find_verified_user()
    emit('connected', {'message': 'Connected to /ws', 'user': user.to_dict()})


def handle_disconnect(reason=None):
    # Runs for every disconnect cause, so listeners never outlive the socket
    _relay().unsubscribe(_listener())


def handle_subscribe(data=None):
    relay = _relay()
    game_id = data.get('id') if isinstance(data, dict) else None
    try:
        game = relay.subscribe(_listener(), game_id)
    except ScoreboardError as exc:
        _emit_error(exc)
        return
    relay.store.assign(find_verified_user(), game)
    emit('subscribed', {'game': game.to_dict()})


def handle_unsubscribe(data=None):
    game_id = _relay().unsubscribe(_listener())
    emit('unsubscribed', {'game_id': game_id})


def handle_score_update(data=None):
    try:
        _relay().update_score(_listener(), data)
    except ScoreboardError as exc:
        _emit_error(exc)


def handle_ping(data=None):
    emit('pong', data or {})


def register_socketio_handlers(testing: bool = False) -> None:
    """Register Socket.IO event handlers.

    Always register on namespace '/ws'. When testing is True, also mirror
    handlers on the default namespace '/' to accommodate the test harness.
    """
    from scoreboard import socketio

    handlers = {
        'connect': handle_connect,
        'disconnect': handle_disconnect,
        'subscribe': handle_subscribe,
        'unsubscribe': handle_unsubscribe,
        'scoreUpdate': handle_score_update,
        'ping': handle_ping,
    }
    namespaces = ['/ws', '/'] if testing else ['/ws']
    for namespace in namespaces:
        for message, handler in handlers.items():
            socketio.on_event(message, handler, namespace=namespace)
