"""Markdown link status checking toolkit."""

from .app import LinkCheckerApp
from .checker import StatusChecker, check_links
from .config import Settings
from .extractor import LinkExtractor, extract_links
from .models import (
    ClassificationResult,
    LinkRecord,
    PolicyConfig,
    PolicyConfigError,
    ProbeOutcome,
)
from .policy import classify, is_good

__all__ = [
    "LinkCheckerApp",
    "StatusChecker",
    "check_links",
    "Settings",
    "LinkExtractor",
    "extract_links",
    "ClassificationResult",
    "LinkRecord",
    "PolicyConfig",
    "PolicyConfigError",
    "ProbeOutcome",
    "classify",
    "is_good",
]
