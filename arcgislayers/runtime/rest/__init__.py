"""REST runtime: HTTP client and resource opener."""

from .http import HTTPClient, check_error_payload, redact_params
from .opener import arc_open, resolve_handle_type

__all__ = [
    "HTTPClient",
    "arc_open",
    "check_error_payload",
    "redact_params",
    "resolve_handle_type",
]
