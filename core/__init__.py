"""Core package - exports request helpers."""

from .helpers import (
    user_from_payload,
    history_from_payload,
    error_response,
)

__all__ = [
    "user_from_payload",
    "history_from_payload",
    "error_response",
]
