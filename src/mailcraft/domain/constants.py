"""Constants shared by the email value types and the builder."""

from typing import Final

NO_SUBJECT: Final = "no subject"

DEFAULT_CONTENT_TYPE: Final = "text/plain"
HTML_CONTENT_TYPE: Final = "text/html"
DEFAULT_CHARSET: Final = "UTF-8"

DEFAULT_ATTACHMENT_CONTENT_TYPE: Final = "application/octet-stream"
