"""Comment content sanitization."""

import re

from bs4 import BeautifulSoup

from .base import Service

_WHITESPACE = re.compile(r"\s+")


class ContentSanitizer(Service):
    """Reduces user-submitted content to plain text."""

    def strip_html(self, raw: str) -> str:
        """Remove markup and collapse whitespace.

        Args:
            raw: User-submitted content

        Returns:
            Plain text, possibly empty
        """
        soup = BeautifulSoup(raw, "html.parser")
        for tag in soup(["script", "style"]):
            tag.decompose()
        text = soup.get_text(separator=" ")
        return _WHITESPACE.sub(" ", text).strip()
