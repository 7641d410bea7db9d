"""Data models for link checking workflows."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional

MIN_STATUS = 100
MAX_STATUS = 599


class PolicyConfigError(ValueError):
    """Raised when pass/fail/only options contradict each other."""


@dataclass(frozen=True)
class LinkRecord:
    """A Markdown link found in a document."""

    text: str
    target: str


@dataclass(frozen=True)
class ProbeOutcome:
    """Result of requesting a single link target.

    Exactly one of ``status_code`` and ``error`` is set: a response of any
    status settles the probe, a network-level failure does not.
    """

    target: str
    status_code: Optional[int] = None
    error: Optional[str] = None

    @property
    def settled(self) -> bool:
        return self.status_code is not None

    @classmethod
    def failure(cls, target: str, exc: BaseException) -> "ProbeOutcome":
        message = str(exc) or exc.__class__.__name__
        return cls(target=target, error=message)


@dataclass
class PolicyConfig:
    """Status code rules deciding whether a link passes."""

    pass_codes: FrozenSet[int] = field(default_factory=frozenset)
    fail_codes: FrozenSet[int] = field(default_factory=frozenset)
    only: Optional[int] = None

    @classmethod
    def build(
        cls,
        pass_codes: Iterable[int] | None = None,
        fail_codes: Iterable[int] | None = None,
        only: int | None = None,
    ) -> "PolicyConfig":
        """Create and validate a policy from optional CLI-style inputs."""
        policy = cls(
            pass_codes=frozenset(pass_codes or ()),
            fail_codes=frozenset(fail_codes or ()),
            only=only,
        )
        policy.validate()
        return policy

    def validate(self) -> None:
        if self.only is not None and (self.pass_codes or self.fail_codes):
            raise PolicyConfigError("--only cannot be combined with --pass or --fail")
        codes = set(self.pass_codes) | set(self.fail_codes)
        if self.only is not None:
            codes.add(self.only)
        for code in sorted(codes):
            if not MIN_STATUS <= code <= MAX_STATUS:
                raise PolicyConfigError(
                    f"Status code {code} is outside {MIN_STATUS}-{MAX_STATUS}"
                )


@dataclass
class ClassificationResult:
    """Settled outcomes split into good and bad, plus unclassified failures."""

    good: List[ProbeOutcome] = field(default_factory=list)
    bad: List[ProbeOutcome] = field(default_factory=list)
    failed: List[ProbeOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of settled outcomes (failures are not counted)."""
        return len(self.good) + len(self.bad)

    def summary(self) -> str:
        return f"{len(self.good)} out of {self.total} links are working!"
