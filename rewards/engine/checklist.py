#!/usr/bin/env python3
"""
Checklist Definitions - Named, grouped profile fields used for completeness.

A checklist is a fixed, ordered set of fields. Each field is looked up by a
dotted path into the raw backend profile (camelCase keys, list indexes as
path segments), e.g. ``professionalExperience.0.currentRole``. A field may
list alias paths; the first one that resolves to a filled value counts.
"""

from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)

VALUE = "value"
LIST = "list"

_MISSING = object()


@dataclass(frozen=True)
class ChecklistField:
    name: str
    paths: Tuple[str, ...]
    kind: str = VALUE


@dataclass(frozen=True)
class ChecklistGroup:
    name: str
    fields: Tuple[ChecklistField, ...]


@dataclass(frozen=True)
class ChecklistDefinition:
    name: str
    groups: Tuple[ChecklistGroup, ...]

    @property
    def fields(self) -> Tuple[ChecklistField, ...]:
        return tuple(f for group in self.groups for f in group.fields)

    @property
    def total_fields(self) -> int:
        return len(self.fields)


def _field(name: str, *paths: str, kind: str = VALUE) -> ChecklistField:
    return ChecklistField(name=name, paths=paths or (name,), kind=kind)


def resolve_path(record: Any, path: str) -> Any:
    """Walk a dotted path through dicts and lists; returns _MISSING when any hop fails."""
    current = record
    for part in path.split('.'):
        if isinstance(current, dict):
            if part not in current:
                return _MISSING
            current = current[part]
        elif isinstance(current, (list, tuple)) and part.isdigit():
            index = int(part)
            if index >= len(current):
                return _MISSING
            current = current[index]
        else:
            return _MISSING
    return current


def get_value(record: Any, path: str, default: Any = None) -> Any:
    value = resolve_path(record, path)
    if value is _MISSING or value is None:
        return default
    return value


def is_filled(value: Any, kind: str = VALUE) -> bool:
    """
    Whether a resolved value counts as completed.

    Strings must be non-blank, sequences non-empty, numbers non-zero.
    Booleans count only when True. Anything else is treated as absent.
    """
    if value is _MISSING or value is None:
        return False
    if kind == LIST:
        return isinstance(value, (list, tuple)) and len(value) > 0
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, (list, tuple, dict)):
        return len(value) > 0
    return False


def field_completed(record: Any, checklist_field: ChecklistField) -> bool:
    return any(
        is_filled(resolve_path(record, path), checklist_field.kind)
        for path in checklist_field.paths
    )


_PERSONAL_INFO = (
    _field("fullName"),
    _field("email"),
    _field("phoneNumber"),
    _field("location"),
    _field("dateOfBirth"),
    _field("nationality"),
    _field("professionalSummary"),
    _field("emirateId"),
    _field("passportNumber"),
)

_EXPERIENCE = ChecklistGroup("Experience", (
    _field("currentRole", "professionalExperience.0.currentRole"),
    _field("company", "professionalExperience.0.company"),
    _field("yearsOfExperience", "professionalExperience.0.yearsOfExperience"),
    _field("industry", "professionalExperience.0.industry"),
))

_EDUCATION = ChecklistGroup("Education", (
    _field("highestDegree", "education.0.highestDegree"),
    _field("institution", "education.0.institution"),
    _field("yearOfGraduation", "education.0.yearOfGraduation"),
    _field("gradeCgpa", "education.0.gradeCgpa"),
))

_SKILLS_AND_DOCUMENTS = ChecklistGroup("Skills, Preferences, Certifications & Resume", (
    _field("skills", kind=LIST),
    _field("preferredJobType", "jobPreferences.preferredJobType", kind=LIST),
    _field("certifications", kind=LIST),
    _field("resumeAndDocs", "jobPreferences.resumeAndDocs", kind=LIST),
))

_SOCIAL_LINKS = ChecklistGroup("Social Links", (
    _field("linkedIn", "socialLinks.linkedIn"),
    _field("instagram", "socialLinks.instagram"),
    _field("twitterX", "socialLinks.twitterX"),
))

JOBSEEKER_CHECKLIST = ChecklistDefinition(
    name="jobseeker",
    groups=(
        ChecklistGroup("Personal Info", _PERSONAL_INFO),
        _EXPERIENCE,
        _EDUCATION,
        _SKILLS_AND_DOCUMENTS,
        _SOCIAL_LINKS,
    ),
)

# Cart-page variant: also counts the employment visa
JOBSEEKER_EXTENDED_CHECKLIST = ChecklistDefinition(
    name="jobseeker_extended",
    groups=(
        ChecklistGroup("Personal Info", _PERSONAL_INFO + (_field("employmentVisa"),)),
        _EXPERIENCE,
        _EDUCATION,
        _SKILLS_AND_DOCUMENTS,
        _SOCIAL_LINKS,
    ),
)

EMPLOYER_CHECKLIST = ChecklistDefinition(
    name="employer",
    groups=(
        ChecklistGroup("Company Profile", (
            _field("companyName"),
            _field("companyEmail", "companyEmail", "email"),
            _field("phoneNumber"),
            _field("website"),
            _field("industry"),
            _field("teamSize"),
            _field("foundedYear"),
            _field("description", "description", "about"),
        )),
    ),
)

CHECKLISTS: Dict[str, ChecklistDefinition] = {
    c.name: c for c in (JOBSEEKER_CHECKLIST, JOBSEEKER_EXTENDED_CHECKLIST, EMPLOYER_CHECKLIST)
}


def get_checklist(name: Optional[str]) -> ChecklistDefinition:
    checklist = CHECKLISTS.get(name or "")
    if checklist is None:
        logger.warning(f"Unknown checklist '{name}', defaulting to '{JOBSEEKER_CHECKLIST.name}'")
        return JOBSEEKER_CHECKLIST
    return checklist
