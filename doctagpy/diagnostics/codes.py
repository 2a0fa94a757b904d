"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


DOCBLOCK_DUPLICATE_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOCBLOCK_DUPLICATE_TAG",
    message="Tag may only appear once per doc comment.",
    hint="Remove the repeated tag or merge its text into the first occurrence.",
    severity="error",
    category="parser",
)
