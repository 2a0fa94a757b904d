"""Diagnostics core types."""

from dataclasses import dataclass

from doctagpy.diagnostics.codes import DiagnosticSpec, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted while parsing a doc comment.

    `line` is 1-based and relative to the first line of the comment.
    """

    code: str
    message: str
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, *, line: int, detail: str | None = None) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message} {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            line=line,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
