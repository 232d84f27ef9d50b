"""HMAC request signing.

Exposed so callers can check how HitBTC expects a request to be signed.
The request agent itself authenticates with HTTP Basic Auth.
"""

import base64
import binascii
import hashlib
import hmac
import json
import time
from typing import Any, Mapping, Optional

from .exceptions import SigningError
from .types import Signature


def sign_message(
    private_key: str,
    path: str,
    method: str,
    body: Optional[Mapping[str, Any]] = None,
    timestamp: Optional[float] = None,
) -> Signature:
    """
    Sign a request.

    The prehash is ``timestamp + METHOD + path``, followed by the compact
    JSON body when one is given, even an empty one.

    Args:
        private_key: Base64-encoded secret key
        path: Request path (e.g., "/order")
        method: HTTP method, any case
        body: Request body
        timestamp: Seconds since epoch; defaults to the current time

    Returns:
        Signature with the base64 digest and the timestamp used
    """
    if timestamp is None:
        timestamp = time.time()

    try:
        key = base64.b64decode(private_key, validate=True)
    except (binascii.Error, ValueError) as error:
        raise SigningError(f"Private key is not valid base64: {error}") from error

    prehash = f"{timestamp}{method.upper()}{path}"
    if body is not None:
        prehash += json.dumps(body, separators=(",", ":"), ensure_ascii=False)

    mac = hmac.new(key, prehash.encode("utf-8"), hashlib.sha256)
    digest = base64.b64encode(mac.digest()).decode("ascii")
    return Signature(digest=digest, timestamp=timestamp)
