#!/usr/bin/env python3
"""
Completeness Scoring - Fraction of a checklist populated on a profile.

Calculates how many checklist fields a profile snapshot fills in and the
rounded percentage shown on the rewards pages.
"""

from typing import Any, Dict, List, Optional, Tuple
import logging

from rewards.engine.checklist import (
    ChecklistDefinition,
    JOBSEEKER_CHECKLIST,
    field_completed,
)
from rewards.engine.models import CompletenessResult

logger = logging.getLogger(__name__)


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest integer, halves going up."""
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


def calculate_percentage(completed: int, total: int) -> int:
    """
    Calculate completeness percentage.

    Formula: round_half_up(completed / total * 100), clamped to 0-100.
    """
    if total <= 0:
        return 0
    completed = max(0, min(completed, total))
    return round_half_up(completed * 100, total)


def score_profile(
    profile: Optional[Dict[str, Any]],
    checklist: ChecklistDefinition = JOBSEEKER_CHECKLIST
) -> CompletenessResult:
    """
    Score a profile snapshot against a checklist.

    Absent, null, blank and empty values count as not completed. Nested
    experience/education fields only look at the first record.

    Args:
        profile: Raw profile dict from the backend (may be None or partial)
        checklist: Checklist to score against

    Returns:
        CompletenessResult with counts, percentage and per-group breakdown
    """
    record = profile if isinstance(profile, dict) else {}

    completed = 0
    groups: Dict[str, Tuple[int, int]] = {}
    missing: List[str] = []

    for group in checklist.groups:
        group_completed = 0
        for checklist_field in group.fields:
            if field_completed(record, checklist_field):
                group_completed += 1
            else:
                missing.append(checklist_field.name)
        groups[group.name] = (group_completed, len(group.fields))
        completed += group_completed

    total = checklist.total_fields
    percentage = calculate_percentage(completed, total)

    logger.debug(f"Checklist '{checklist.name}': {completed}/{total} fields ({percentage}%)")

    return CompletenessResult(
        completed_count=completed,
        total_fields=total,
        percentage=percentage,
        checklist=checklist.name,
        groups=groups,
        missing_fields=missing,
    )
