from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from mailcraft.domain.entities.attachment import EmailAttachment
from mailcraft.domain.entities.body import EmailBody


class Email(Protocol):
    """Read-only view of a finished email."""

    @property
    def subject(self) -> str: ...

    @property
    def from_addresses(self) -> tuple[str, ...]: ...

    @property
    def to_addresses(self) -> tuple[str, ...]: ...

    @property
    def cc_addresses(self) -> tuple[str, ...]: ...

    @property
    def bcc_addresses(self) -> tuple[str, ...]: ...

    @property
    def reply_to_addresses(self) -> tuple[str, ...]: ...

    @property
    def body(self) -> EmailBody: ...

    @property
    def attachments(self) -> tuple[EmailAttachment, ...]: ...

    @property
    def headers(self) -> Mapping[str, tuple[str, ...]]: ...

    @property
    def has_attachments(self) -> bool: ...

    @property
    def recipients(self) -> tuple[str, ...]: ...

    def as_dict(self) -> dict[str, Any]: ...


@dataclass(frozen=True)
class OutgoingEmail:
    subject: str
    from_addresses: tuple[str, ...]
    to_addresses: tuple[str, ...]
    cc_addresses: tuple[str, ...]
    bcc_addresses: tuple[str, ...]
    reply_to_addresses: tuple[str, ...]
    body: EmailBody
    attachments: tuple[EmailAttachment, ...]
    # read-only, see HeaderMap.freeze(); excluded from hash()
    headers: Mapping[str, tuple[str, ...]] = field(hash=False)

    @property
    def has_attachments(self) -> bool:
        return bool(self.attachments)

    @property
    def recipients(self) -> tuple[str, ...]:
        """Every delivery address: To, then Cc, then Bcc."""
        return self.to_addresses + self.cc_addresses + self.bcc_addresses

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly summary; attachment content is left out."""
        return {
            "subject": self.subject,
            "from": list(self.from_addresses),
            "to": list(self.to_addresses),
            "cc": list(self.cc_addresses),
            "bcc": list(self.bcc_addresses),
            "reply_to": list(self.reply_to_addresses),
            "headers": {key: list(values) for key, values in self.headers.items()},
            "body": {
                "content_type": self.body.content_type,
                "charset": self.body.charset,
                "content": self.body.content,
            },
            "attachments": [
                {"id": a.id, "content_type": a.content_type, "size": a.size}
                for a in self.attachments
            ],
        }
