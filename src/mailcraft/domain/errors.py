"""Error hierarchy for mailcraft."""

from __future__ import annotations

from enum import Enum


class MailcraftError(Exception):
    """Base exception for every error raised by mailcraft."""


class MissingField(str, Enum):
    """Mandatory email components checked when building."""

    FROM = "FROM address"
    TO = "TO address(es)"
    BODY = "body"


class IncompleteEmailError(MailcraftError):
    """Raised when an email is built without a mandatory component."""

    def __init__(self, missing: MissingField) -> None:
        self.missing = missing
        super().__init__(f"Cannot build an Email with no {missing.value}")
