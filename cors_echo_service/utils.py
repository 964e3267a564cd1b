from typing import Dict

from cors_echo_service.models import CorsPolicy

GREETING = "Hello, World!"
ECHO_PREFIX = "Echo: "


def hello_text() -> str:
    return GREETING


def echo_text(raw: bytes) -> str:
    """Return the echo reply for a raw request body.

    Invalid UTF-8 sequences are replaced with U+FFFD rather than rejected.
    """
    return ECHO_PREFIX + raw.decode("utf-8", errors="replace")


def cors_headers(policy: CorsPolicy) -> Dict[str, str]:
    """Return the response headers for a CORS policy."""
    return {
        "Access-Control-Allow-Origin": policy.allow_origin,
        "Access-Control-Allow-Methods": policy.allow_methods,
        "Access-Control-Allow-Headers": policy.allow_headers,
    }
