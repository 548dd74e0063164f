from __future__ import annotations

from dataclasses import dataclass

from mailcraft.domain.constants import DEFAULT_CHARSET, DEFAULT_CONTENT_TYPE, HTML_CONTENT_TYPE


@dataclass(frozen=True)
class EmailBody:
    content: str
    content_type: str = DEFAULT_CONTENT_TYPE
    charset: str = DEFAULT_CHARSET

    @classmethod
    def plain(cls, text: str) -> EmailBody:
        return cls(content=text)

    @classmethod
    def html(cls, markup: str) -> EmailBody:
        return cls(content=markup, content_type=HTML_CONTENT_TYPE)

    @property
    def is_html(self) -> bool:
        return self.content_type.lower() == HTML_CONTENT_TYPE
