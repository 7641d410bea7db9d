"""Pass/fail evaluation of probe outcomes."""
from __future__ import annotations

from typing import Iterable, List

from .models import ClassificationResult, PolicyConfig, ProbeOutcome


def is_good(status: int, policy: PolicyConfig) -> bool:
    """Decide whether *status* passes under *policy*.

    ``only`` replaces every other rule. Otherwise 2xx passes, codes in
    ``pass_codes`` pass regardless of range, and codes in ``fail_codes``
    fail even when the baseline or ``pass_codes`` would let them through.
    """
    if policy.only is not None:
        return status == policy.only
    if status in policy.fail_codes:
        return False
    if status in policy.pass_codes:
        return True
    return 200 <= status <= 299


def filter_outcomes(
    outcomes: Iterable[ProbeOutcome], policy: PolicyConfig, forwards: bool = True
) -> List[ProbeOutcome]:
    """Keep settled outcomes that are good (``forwards``) or bad (otherwise)."""
    return [
        outcome
        for outcome in outcomes
        if outcome.settled and is_good(outcome.status_code, policy) == forwards
    ]


def classify(outcomes: Iterable[ProbeOutcome], policy: PolicyConfig) -> ClassificationResult:
    """Partition outcomes into good and bad, keeping input order in each.

    Failed probes carry no status and are set aside in ``failed``.
    """
    result = ClassificationResult()
    for outcome in outcomes:
        if not outcome.settled:
            result.failed.append(outcome)
        elif is_good(outcome.status_code, policy):
            result.good.append(outcome)
        else:
            result.bad.append(outcome)
    return result
