"""Diagnostics."""

from doctagpy.diagnostics.codes import DOCBLOCK_DUPLICATE_TAG, DiagnosticSpec
from doctagpy.diagnostics.diagnostic import Diagnostic, Severity
from doctagpy.diagnostics.report import collect_diagnostics, has_errors, sort_diagnostics

__all__ = [
    "DOCBLOCK_DUPLICATE_TAG",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "sort_diagnostics",
]
