"""
Summarization module - Transcript summarization services.
"""

from .dispatcher import TranscriptSummarizer, validate_inputs
from .parser import parse_summary_content

__all__ = ["TranscriptSummarizer", "parse_summary_content", "validate_inputs"]
