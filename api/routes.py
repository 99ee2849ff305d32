from flask import Blueprint, request, jsonify, current_app
from werkzeug.exceptions import HTTPException
from ringbuffer.errors import BufferEmpty, BufferFull
bp = Blueprint("api", __name__)


def _buffer():
    return current_app.extensions["ring_buffer"]


def _lock():
    return current_app.extensions["ring_buffer_lock"]


@bp.errorhandler(BufferFull)
def handle_full(e):
    current_app.logger.info("put rejected: %s", e)
    return jsonify({"error": "buffer full", "capacity": _buffer().capacity}), 409


@bp.errorhandler(BufferEmpty)
def handle_empty(e):
    current_app.logger.info("read on empty buffer: %s", e)
    return jsonify({"error": "buffer empty"}), 404


@bp.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return e
    current_app.logger.exception("ring buffer request failed")
    return jsonify({"error": "internal error"}), 500


@bp.route("/api/buffer", methods=["POST"])
def put_value():
    """
    Store a value in the ring buffer.

    Takes the value from the JSON body ({"value": ...}) when one is sent,
    otherwise draws the next number from the app's sequence generator.
    """
    if request.get_data():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "expected a JSON object"}), 400
        if "value" not in data:
            return jsonify({"error": "missing field", "details": "value"}), 400
        value = data["value"]
        generated = False
    else:
        value, generated = None, True

    buf = _buffer()
    with _lock():
        if generated:
            # only consume a sequence number when the put will succeed
            if buf.rejects_put():
                raise BufferFull(f"buffer full (capacity={buf.capacity})")
            value = current_app.extensions["value_source"].next()
        buf.put(value)
        size = buf.size()
    return jsonify({"value": value, "size": size, "capacity": buf.capacity}), 201


@bp.route("/api/buffer/get", methods=["POST"])
def get_value():
    """Remove and return the oldest value."""
    buf = _buffer()
    with _lock():
        value = buf.get()
        size = buf.size()
    return jsonify({"value": value, "size": size})


@bp.route("/api/buffer/peek", methods=["GET"])
def peek_value():
    with _lock():
        value = _buffer().peek()
    return jsonify({"value": value})


@bp.route("/api/buffer/size", methods=["GET"])
def get_size():
    buf = _buffer()
    with _lock():
        size = buf.size()
    return jsonify({"size": size, "capacity": buf.capacity})


@bp.route("/api/buffer", methods=["GET"])
def get_state():
    """Return capacity, occupancy and stored items (oldest->newest) for display."""
    buf = _buffer()
    with _lock():
        state = {
            "capacity": buf.capacity,
            "policy": buf.policy,
            "size": buf.size(),
            "empty": buf.is_empty(),
            "full": buf.is_full(),
            "items": buf.snapshot(),
        }
    return jsonify(state)


@bp.route("/api/buffer", methods=["DELETE"])
def clear_buffer():
    with _lock():
        _buffer().clear()
    current_app.logger.info("ring buffer cleared")
    return jsonify({"size": 0})
