# Role: Access gatekeeper per intent. Student-only features need a student principal with a degree;
# a failed check is answered with a normal localized message, never an error.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from campus_copilot.models.intent import Intent
from campus_copilot.models.principal import Principal

_STUDENT_ONLY = {Intent.SCHEDULE_QUERY, Intent.MODULE_QUERY}


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    # Template key explaining the restriction ("student_only" / "degree_not_set").
    problem: Optional[str] = None


class Validator:
    def validate(self, intent: Intent, principal: Principal) -> ValidationResult:
        # 1) Only student-only intents are gated
        # 2) Role check wins over degree check
        if intent not in _STUDENT_ONLY:
            return ValidationResult(ok=True)

        if not principal.is_student:
            return ValidationResult(ok=False, problem="student_only")

        if principal.degree is None:
            return ValidationResult(ok=False, problem="degree_not_set")

        return ValidationResult(ok=True)
