"""Link check reporting utilities."""
from __future__ import annotations

from typing import Any, Dict, List, Sequence

from .models import ClassificationResult, ProbeOutcome

LINK_MIN_WIDTH = 20
STATUS_MIN_WIDTH = 10


def render_summary(result: ClassificationResult) -> str:
    return result.summary()


def render_table(outcomes: Sequence[ProbeOutcome]) -> str:
    """Return a two-column ``link``/``status`` table."""

    link_width = max([LINK_MIN_WIDTH] + [len(o.target) for o in outcomes])
    status_width = max([STATUS_MIN_WIDTH] + [len(str(o.status_code)) for o in outcomes])
    lines = [
        f"{'Link'.ljust(link_width)} {'Status'.ljust(status_width)}".rstrip(),
        f"{'─' * link_width} {'─' * status_width}",
    ]
    for outcome in outcomes:
        lines.append(
            f"{outcome.target.ljust(link_width)} {str(outcome.status_code).ljust(status_width)}".rstrip()
        )
    return "\n".join(lines)


def render_plain(outcomes: Sequence[ProbeOutcome]) -> str:
    return "\n".join(outcome.target for outcome in outcomes)


def render_report(result: ClassificationResult, plain: bool = False) -> str:
    """Return a human-readable report of the broken links.

    With ``plain`` only the broken targets are listed, one per line.
    """

    if plain:
        return render_plain(result.bad)

    lines = [render_summary(result)]
    if result.bad:
        lines.append(f"{len(result.bad)} links are broken!")
        lines.extend(["", "Broken Links:", "", render_table(result.bad)])
    if result.failed:
        lines.extend(["", "Unreachable (not counted):"])
        lines.extend(f"{o.target} -> {o.error}" for o in result.failed)
    return "\n".join(lines)


def _serialize_outcomes(outcomes: Sequence[ProbeOutcome]) -> List[Dict[str, Any]]:
    return [{"link": o.target, "status": o.status_code} for o in outcomes]


def to_json(result: ClassificationResult) -> Dict[str, Any]:
    return {
        "summary": render_summary(result),
        "good": _serialize_outcomes(result.good),
        "bad": _serialize_outcomes(result.bad),
        "failed": [{"link": o.target, "error": o.error} for o in result.failed],
    }
