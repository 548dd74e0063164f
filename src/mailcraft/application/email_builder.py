"""Fluent builder for immutable outgoing emails."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from loguru import logger

from mailcraft.domain.constants import NO_SUBJECT
from mailcraft.domain.entities import Email, EmailAttachment, EmailBody, HeaderMap, OutgoingEmail
from mailcraft.domain.entities.headers import HeaderSource
from mailcraft.domain.errors import IncompleteEmailError, MissingField

Addresses = Union[str, Iterable[str]]


@dataclass
class BuildResult:
    """Outcome of ``EmailBuilder.try_build``."""

    success: bool
    email: Email | None = None
    error: IncompleteEmailError | None = None

    @property
    def missing(self) -> MissingField | None:
        return self.error.missing if self.error else None


class EmailBuilder:
    """Collects the parts of an email and produces an ``OutgoingEmail``.

    Every mutator returns the builder itself so calls can be chained:

        email = (
            EmailBuilder.new_email()
            .from_address("alice@example.com")
            .to(["bob@example.com", "carol@example.com"])
            .with_subject("Quarterly report")
            .with_body("See attached.")
            .build()
        )

    Nothing is validated until ``build()``. A builder is meant to be used by
    a single caller; it holds no lock.
    """

    def __init__(self) -> None:
        self._subject: str = NO_SUBJECT
        self._from: list[str] = []
        self._to: list[str] = []
        self._cc: list[str] = []
        self._bcc: list[str] = []
        self._headers = HeaderMap()
        self._reply_to: list[str] = []
        self._attachments: list[EmailAttachment] = []
        self._body: Optional[EmailBody] = None

    @classmethod
    def new_email(cls) -> EmailBuilder:
        return cls()

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def body(self) -> Optional[EmailBody]:
        return self._body

    def with_subject(self, subject: str) -> EmailBuilder:
        self._subject = subject
        return self

    def from_address(self, address: str) -> EmailBuilder:
        """Add a "From" address. One sender is expected by convention."""
        self._from.append(address)
        return self

    def to(self, addresses: Addresses) -> EmailBuilder:
        """Add one or more primary recipients."""
        _extend(self._to, addresses)
        return self

    def cc(self, addresses: Addresses) -> EmailBuilder:
        _extend(self._cc, addresses)
        return self

    def bcc(self, addresses: Addresses) -> EmailBuilder:
        _extend(self._bcc, addresses)
        return self

    def with_headers(self, headers: HeaderSource) -> EmailBuilder:
        """Merge ``headers`` into the headers collected so far."""
        self._headers.put_all(headers)
        return self

    def with_header(self, key: str, value: str) -> EmailBuilder:
        self._headers.put(key, value)
        return self

    def reply_to(self, addresses: Addresses) -> EmailBuilder:
        """Set the "Reply-To" addresses.

        Unlike ``to``/``cc``/``bcc`` this replaces any addresses given by an
        earlier call instead of appending to them. Existing callers depend on
        the replacement, so it is kept.
        """
        self._reply_to = [addresses] if isinstance(addresses, str) else list(addresses)
        return self

    def with_body(self, body: Union[EmailBody, str]) -> EmailBuilder:
        """Set the body; a plain ``str`` becomes a text/plain body."""
        self._body = body if isinstance(body, EmailBody) else EmailBody.plain(body)
        return self

    def with_attachments(self, attachments: Iterable[EmailAttachment]) -> EmailBuilder:
        self._attachments.extend(attachments)
        return self

    def with_attachment(self, attachment: EmailAttachment) -> EmailBuilder:
        self._attachments.append(attachment)
        return self

    def build(self) -> Email:
        """Validate the draft and return an immutable ``OutgoingEmail``.

        Raises:
            IncompleteEmailError: if the sender, the primary recipients or
                the body is missing (checked in that order).
        """
        missing = self._first_missing()
        if missing is not None:
            logger.warning(f"Email build rejected: no {missing.value}")
            raise IncompleteEmailError(missing)

        email = OutgoingEmail(
            subject=self._subject,
            from_addresses=tuple(self._from),
            to_addresses=tuple(self._to),
            cc_addresses=tuple(self._cc),
            bcc_addresses=tuple(self._bcc),
            reply_to_addresses=tuple(self._reply_to),
            body=self._body,
            attachments=tuple(self._attachments),
            headers=self._headers.freeze(),
        )
        logger.debug(
            f"Built email: {len(email.recipients)} recipients, "
            f"{len(email.attachments)} attachments, {len(self._headers)} headers"
        )
        return email

    def try_build(self) -> BuildResult:
        """Like ``build()`` but reports a missing component in the result."""
        try:
            return BuildResult(success=True, email=self.build())
        except IncompleteEmailError as e:
            return BuildResult(success=False, error=e)

    def _first_missing(self) -> Optional[MissingField]:
        if not self._from:
            return MissingField.FROM
        if not self._to:
            return MissingField.TO
        if self._body is None:
            return MissingField.BODY
        return None


def _extend(target: list[str], addresses: Addresses) -> None:
    if isinstance(addresses, str):
        target.append(addresses)
    else:
        target.extend(addresses)
