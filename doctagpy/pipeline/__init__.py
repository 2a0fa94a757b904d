"""Shared parse carriers."""

from doctagpy.pipeline.result import DocblockParseResult

__all__ = ["DocblockParseResult"]
