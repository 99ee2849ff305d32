import os

BUFFER_CAPACITY = int(os.environ.get("RING_BUFFER_CAPACITY", "20"))
BUFFER_POLICY = os.environ.get("RING_BUFFER_POLICY", "reject")

API_HOST = os.environ.get("RING_BUFFER_API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("RING_BUFFER_API_PORT", "5000"))
LOG_LEVEL = os.environ.get("RING_BUFFER_LOG_LEVEL", "INFO").upper()
