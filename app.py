# ring_buffer_app/app.py
import logging
import threading

from flask import Flask
from flask.logging import default_handler
import config
from api.routes import bp
from ringbuffer.ring_buffer import RingBuffer
from ringbuffer.sequence import SequenceGenerator


def create_app(capacity=None, policy=None):
    app = Flask(__name__)
    app.config["BUFFER_CAPACITY"] = config.BUFFER_CAPACITY if capacity is None else capacity
    app.config["BUFFER_POLICY"] = policy or config.BUFFER_POLICY
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    app.logger.setLevel(level)
    # the buffer core logs under "ringbuffer"; route it through Flask's handler
    core_logger = logging.getLogger("ringbuffer")
    core_logger.setLevel(level)
    if default_handler not in core_logger.handlers:
        core_logger.addHandler(default_handler)

    # InvalidCapacity here is fatal to startup
    app.extensions["ring_buffer"] = RingBuffer(
        app.config["BUFFER_CAPACITY"], policy=app.config["BUFFER_POLICY"]
    )
    app.extensions["ring_buffer_lock"] = threading.Lock()
    app.extensions["value_source"] = SequenceGenerator()

    # Register API blueprint
    app.register_blueprint(bp)

    app.logger.info(
        "ring buffer ready capacity=%s policy=%s",
        app.config["BUFFER_CAPACITY"], app.config["BUFFER_POLICY"],
    )
    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host=config.API_HOST, port=config.API_PORT, debug=True)
