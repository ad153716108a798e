"""
Errors raised while encoding or sending a mail.

Both are fatal to the current send attempt; the caller owns any retry policy.
"""
from __future__ import annotations


class SendgridError(Exception):
    """Base class for all sgclient errors."""


class EncodingError(SendgridError):
    """The mail could not be rendered as a form-encoded body."""


class TransportError(SendgridError):
    """The HTTP request to the API failed before a response body was read."""
