"""
Parsers for untrusted model output.

Model text is free-form; anything that does not meet the contract is
rejected with the raw text attached rather than coerced into a value that
could reach the database.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Tuple

from .exceptions import (
    EmptyReasonError,
    InvalidRoleAssignmentError,
    MalformedResponseError,
    MalformedScoreError,
    ScoreOutOfRangeError,
)
from .models import SCORE_MAX, SCORE_MIN
from .prompts import ROLE_VOCABULARY

SCORE_SEPARATOR = "|"
ROLE_SEPARATOR = " - "
TWO_PLACES = Decimal("0.01")

# Plain ASCII decimal with an optional exponent. Rejects digit-group
# underscores, non-ASCII digits, NaN and Infinity, all of which Decimal accepts.
SCORE_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)

_ROLES_BY_KEY = {role.casefold(): role for role in ROLE_VOCABULARY}


@dataclass(frozen=True)
class CompatibilityVerdict:
    score: Decimal
    reason: str


def parse_compatibility_response(raw: str) -> CompatibilityVerdict:
    """
    Parse ``"<score>|<reason>"`` into a validated verdict.

    Only the first ``|`` separates score from reason; later ones belong to
    the reason. The score is kept to two fractional digits.

    Raises:
        MalformedResponseError: No separator present.
        MalformedScoreError: Score segment is not a plain decimal number.
        ScoreOutOfRangeError: Score outside [0, 100].
        EmptyReasonError: Reason is blank after trimming.
    """
    segments = raw.split(SCORE_SEPARATOR, 1)
    if len(segments) < 2:
        raise MalformedResponseError(raw)

    score_text, reason_text = segments[0].strip(), segments[1]

    if not SCORE_PATTERN.fullmatch(score_text):
        raise MalformedScoreError(score_text, raw)
    score = Decimal(score_text)

    if score < SCORE_MIN or score > SCORE_MAX:
        raise ScoreOutOfRangeError(score, raw)

    reason = reason_text.strip()
    if not reason:
        raise EmptyReasonError(raw)

    score = score.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    if score.is_zero():
        score = score.copy_abs()

    return CompatibilityVerdict(
        score=score,
        reason=reason,
    )


def parse_role_assignment(raw: str) -> List[Tuple[str, str]]:
    """
    Parse ``"<name> - <role>"`` lines into ``(name, role)`` pairs.

    Blank lines are skipped. Roles are matched case-insensitively against
    ``ROLE_VOCABULARY`` and returned in their canonical spelling. The role
    endpoint does not depend on this; it is offered to callers that need
    structured assignments.
    """
    assignments: List[Tuple[str, str]] = []
    for line in raw.splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        name, separator, role_text = stripped.rpartition(ROLE_SEPARATOR)
        name = name.strip()
        role = _ROLES_BY_KEY.get(role_text.strip().casefold())
        if not separator or not name or role is None:
            raise InvalidRoleAssignmentError(stripped, raw)
        assignments.append((name, role))

    if not assignments:
        raise InvalidRoleAssignmentError("", raw)
    return assignments
