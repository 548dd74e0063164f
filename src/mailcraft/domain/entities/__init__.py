"""Immutable email value types."""

from mailcraft.domain.entities.attachment import EmailAttachment
from mailcraft.domain.entities.body import EmailBody
from mailcraft.domain.entities.email import Email, OutgoingEmail
from mailcraft.domain.entities.headers import HeaderMap

__all__ = [
    "Email",
    "OutgoingEmail",
    "EmailBody",
    "EmailAttachment",
    "HeaderMap",
]
