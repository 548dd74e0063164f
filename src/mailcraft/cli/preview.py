"""Build an email from command-line arguments and print it as JSON."""

from __future__ import annotations

import argparse
import json
import mimetypes
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from mailcraft.application.email_builder import EmailBuilder
from mailcraft.domain.constants import DEFAULT_ATTACHMENT_CONTENT_TYPE
from mailcraft.domain.entities import EmailAttachment, EmailBody
from mailcraft.domain.errors import MailcraftError
from mailcraft.infrastructure import Settings, configure_logging, get_settings


class AttachmentTooLargeError(MailcraftError):
    """Raised when a file passed with --attach exceeds the configured limit."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preview an outgoing email as JSON")
    parser.add_argument("--from", dest="sender", default=None, help="Sender address")
    parser.add_argument("--to", action="append", default=[], help="Primary recipient (repeatable)")
    parser.add_argument("--cc", action="append", default=[], help="Carbon copy recipient (repeatable)")
    parser.add_argument("--bcc", action="append", default=[], help="Blind carbon copy recipient (repeatable)")
    parser.add_argument("--reply-to", action="append", default=[], help="Reply-To address (repeatable)")
    parser.add_argument("--subject", default=None, help="Subject line")
    parser.add_argument("--body", default=None, help="Body text")
    parser.add_argument("--html", action="store_true", help="Treat --body as HTML")
    parser.add_argument("--header", action="append", default=[], metavar="KEY=VALUE", help="Extra header (repeatable)")
    parser.add_argument("--attach", action="append", default=[], metavar="PATH", help="File to attach (repeatable)")
    return parser


def parse_header(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"Header must look like KEY=VALUE, got {raw!r}")
    return key.strip(), value.strip()


class AttachmentUnreadableError(MailcraftError):
    """Raised when a file passed with --attach cannot be read."""


def load_attachment(path: Path, settings: Settings) -> EmailAttachment:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise AttachmentUnreadableError(f"Cannot read {path}: {e.strerror or e}") from e
    if len(data) > settings.max_attachment_bytes:
        raise AttachmentTooLargeError(
            f"{path.name} is {len(data)} bytes, limit is {settings.max_attachment_bytes}"
        )
    content_type, _ = mimetypes.guess_type(path.name)
    return EmailAttachment(
        id=path.name,
        content=data,
        content_type=content_type or DEFAULT_ATTACHMENT_CONTENT_TYPE,
    )


def builder_from_args(args: argparse.Namespace, settings: Settings) -> EmailBuilder:
    builder = EmailBuilder.new_email()
    if args.sender:
        builder.from_address(args.sender)
    builder.to(args.to).cc(args.cc).bcc(args.bcc)
    if args.reply_to:
        builder.reply_to(args.reply_to)
    if args.subject is not None:
        builder.with_subject(args.subject)
    if args.body is not None:
        builder.with_body(EmailBody.html(args.body) if args.html else args.body)
    for raw in args.header:
        builder.with_header(*parse_header(raw))
    for path in args.attach:
        builder.with_attachment(load_attachment(Path(path), settings))
    return builder


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid MAILCRAFT_* settings: {e}")
        return 1
    configure_logging(settings)

    try:
        email = builder_from_args(args, settings).build()
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except MailcraftError as e:
        logger.error(f"Could not build email: {e}")
        return 1

    print(json.dumps(email.as_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
