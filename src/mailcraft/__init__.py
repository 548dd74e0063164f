"""Fluent construction of immutable outgoing email values."""

from mailcraft.application.email_builder import BuildResult, EmailBuilder
from mailcraft.domain.constants import NO_SUBJECT
from mailcraft.domain.entities import Email, EmailAttachment, EmailBody, HeaderMap, OutgoingEmail
from mailcraft.domain.errors import IncompleteEmailError, MailcraftError, MissingField

__version__ = "0.1.0"

__all__ = [
    "EmailBuilder",
    "BuildResult",
    "Email",
    "OutgoingEmail",
    "EmailBody",
    "EmailAttachment",
    "HeaderMap",
    "NO_SUBJECT",
    "MailcraftError",
    "IncompleteEmailError",
    "MissingField",
]
