"""
Parsing of the JSON document embedded in a completion message.

The completion endpoint returns JSON whose ``content`` field is itself JSON
text.  This module handles the inner document only.
"""

import json
import logging

import pydantic

from meeting_summarizer.core.exceptions import FormatError
from meeting_summarizer.core.models import SummaryResult
from meeting_summarizer.core.utils import strip_code_fences

logger = logging.getLogger(__name__)


def parse_summary_content(content: str) -> SummaryResult:
    """Parse message content into a SummaryResult in a single attempt.

    Both ``summary`` and ``actionItems`` must be present and be lists of
    strings; the strings themselves are accepted as-is.

    Raises:
        FormatError: If the content is not JSON or has the wrong shape.
    """
    cleaned = strip_code_fences(content)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning("Completion content is not valid JSON")
        raise FormatError(f"Invalid JSON in completion content: {cleaned[:200]}") from exc

    try:
        return SummaryResult.model_validate(data)
    except pydantic.ValidationError as exc:
        logger.warning("Completion content has unexpected shape: %d error(s)", exc.error_count())
        raise FormatError(f"Completion content has unexpected shape: {cleaned[:200]}") from exc
