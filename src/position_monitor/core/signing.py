import hashlib
import hmac
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote


def canonicalize(params: Mapping[str, Any]) -> str:
    """Build the sorted ``key=value&...`` string the venue recomputes on its side.

    Values are percent-encoded with space as ``%20``; keys are used verbatim.
    """
    return "&".join(f"{key}={quote(str(params[key]), safe='')}" for key in sorted(params))


def sign(access_key: str, secret_key: str, request_time: str, param_string: str) -> str:
    """HMAC-SHA256 over access_key + request_time + param_string, keyed by secret_key."""
    payload = access_key + request_time + param_string
    digest = hmac.new(secret_key.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256)
    return digest.hexdigest()


def request_timestamp() -> str:
    return str(int(time.time() * 1000))
