import os
import random
import sys
import time
from collections import deque

import requests


API_URL = os.environ.get("RING_BUFFER_API_URL", "http://127.0.0.1:5000/api/buffer")


def plan_operations(count=200, seed=0, put_weight=0.55):
    """
    Builds a random interleaving of "put" and "get" operations.
    Returns a list of operation names.
    """
    rng = random.Random(seed)
    return ["put" if rng.random() < put_weight else "get" for _ in range(count)]


def send_put(session):
    """
    Asks the host to store its next sequence value.
    Returns the response object, or None on a transport error.
    """
    try:
        return session.post(API_URL, timeout=10)
    except requests.exceptions.RequestException as e:
        print(f"Failed to POST to API: {e}", file=sys.stderr)
        return None


def send_get(session):
    try:
        return session.post(f"{API_URL}/get", timeout=10)
    except requests.exceptions.RequestException as e:
        print(f"Failed to POST to API: {e}", file=sys.stderr)
        return None


def run_operations(session, operations, delay=0.0):
    """
    Drives the host as producer and consumer and checks FIFO order against
    a local record of what was accepted. Assumes the host runs the reject
    overflow policy; under overwrite, dropped values show up as mismatches.
    Returns counters for accepted, rejected and mismatched operations,
    or None when the host could not be reached.
    """
    expected = deque()
    stats = {"put": 0, "get": 0, "full": 0, "empty": 0, "mismatch": 0}

    for op in operations:
        resp = send_put(session) if op == "put" else send_get(session)
        if resp is None:
            return None

        if op == "put":
            if resp.status_code == 409:
                stats["full"] += 1
            else:
                resp.raise_for_status()
                expected.append(resp.json()["value"])
                stats["put"] += 1
        else:
            if resp.status_code == 404:
                stats["empty"] += 1
                if expected:
                    print("WARNING: host reported empty but values are pending", file=sys.stderr)
                    stats["mismatch"] += 1
            else:
                resp.raise_for_status()
                got = resp.json()["value"]
                want = expected.popleft() if expected else None
                if got != want:
                    print(f"WARNING: expected {want}, got {got}", file=sys.stderr)
                    stats["mismatch"] += 1
                stats["get"] += 1

        if delay:
            time.sleep(delay)

    return stats


def main(count=200, delay=0.0, seed=0):
    operations = plan_operations(count, seed)
    print(f"Running {len(operations)} operations against {API_URL}")

    with requests.Session() as session:
        stats = run_operations(session, operations, delay)
    if stats is None:
        return 1

    print("Summary:", ", ".join(f"{k}={v}" for k, v in stats.items()))
    return 1 if stats["mismatch"] else 0


if __name__ == "__main__":
    if "--dry-run" in sys.argv:
        print("Dry run mode: No requests will be sent to the API.")
        for i, op in enumerate(plan_operations()):
            print(i, op)
    else:
        sys.exit(main())
