import hashlib
import json


def payload_hash(payload: dict, prefix: str = "") -> str:
    """Stable sha256 of a JSON-serialisable payload, key order ignored."""
    s = json.dumps(payload, sort_keys=True, default=str)
    return prefix + hashlib.sha256(s.encode()).hexdigest()
