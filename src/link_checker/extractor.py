"""Utilities for detecting Markdown links in text."""
from __future__ import annotations

import re
from typing import List

from .models import LinkRecord


class LinkExtractor:
    """Extract ``[text](target)`` links in document order."""

    LINK_PATTERN = re.compile(r"\[(?P<text>[^\[]+)\]\((?P<target>[^)]+)\)")

    def extract(self, text: str) -> List[LinkRecord]:
        return [
            LinkRecord(text=match.group("text"), target=match.group("target"))
            for match in self.LINK_PATTERN.finditer(text)
        ]


def extract_links(text: str) -> List[LinkRecord]:
    """Return every Markdown link in *text*; targets are passed through unvalidated."""
    return LinkExtractor().extract(text)
