from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mailcraft.domain.constants import DEFAULT_ATTACHMENT_CONTENT_TYPE


@dataclass(frozen=True)
class EmailAttachment:
    # File name as it should appear to the recipient
    id: str
    content: Union[bytes, str]
    content_type: str = DEFAULT_ATTACHMENT_CONTENT_TYPE

    @property
    def size(self) -> int:
        if isinstance(self.content, str):
            return len(self.content.encode("utf-8"))
        return len(self.content)
