"""High-level orchestrator for link checking workflows."""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Tuple

from .checker import StatusChecker
from .extractor import LinkExtractor
from .models import ClassificationResult, LinkRecord, PolicyConfig
from .policy import classify


class LinkCheckerApp:
    """Coordinates extraction, probing, and classification of links."""

    def __init__(
        self,
        status_checker: StatusChecker | None = None,
        policy: PolicyConfig | None = None,
    ):
        self.extractor = LinkExtractor()
        self.status_checker = status_checker or StatusChecker()
        self.policy = policy or PolicyConfig()

    async def check_text(self, text: str) -> Tuple[List[LinkRecord], ClassificationResult]:
        links = self.extractor.extract(text)
        outcomes = await self.status_checker.check(links)
        return links, classify(outcomes, self.policy)

    def process_text(self, text: str) -> Tuple[List[LinkRecord], ClassificationResult]:
        return asyncio.run(self.check_text(text))

    @staticmethod
    def load_text(file_path: str | Path) -> str:
        """Read a document as UTF-8; read errors propagate to the caller."""
        return Path(file_path).read_text(encoding="utf-8")

    def process_file(self, file_path: str | Path) -> Tuple[List[LinkRecord], ClassificationResult]:
        return self.process_text(self.load_text(file_path))
