"""Unit tests for parsing the JSON embedded in completion content."""

import json

import pytest

from meeting_summarizer.core.exceptions import FormatError
from meeting_summarizer.core.models import SummaryResult
from meeting_summarizer.services.summarization.parser import parse_summary_content


class TestParseHappyPath:
    """Well-formed content becomes a SummaryResult."""

    def test_returns_summary_result(self):
        content = json.dumps({"summary": ["A", "B"], "actionItems": ["Follow up with X"]})

        result = parse_summary_content(content)

        assert isinstance(result, SummaryResult)
        assert result.summary == ["A", "B"]
        assert result.action_items == ["Follow up with X"]

    def test_empty_lists_are_valid(self):
        result = parse_summary_content('{"summary": [], "actionItems": []}')

        assert result.summary == []
        assert result.action_items == []

    def test_strings_are_kept_verbatim(self):
        odd = "  **bold** <script>x</script> ✓  "
        result = parse_summary_content(json.dumps({"summary": [odd], "actionItems": [""]}))

        assert result.summary == [odd]
        assert result.action_items == [""]

    def test_code_fenced_content_is_accepted(self):
        content = '```json\n{"summary": ["A"], "actionItems": []}\n```'

        result = parse_summary_content(content)

        assert result.summary == ["A"]

    def test_extra_keys_are_ignored(self):
        content = json.dumps({"summary": ["A"], "actionItems": [], "notes": "x"})

        result = parse_summary_content(content)

        assert result.summary == ["A"]


class TestParseFailures:
    """Anything that is not the two-array shape is a FormatError."""

    def test_invalid_json(self):
        with pytest.raises(FormatError, match="Invalid JSON"):
            parse_summary_content("Here is your summary: - A - B")

    def test_missing_action_items(self):
        with pytest.raises(FormatError, match="unexpected shape"):
            parse_summary_content('{"summary": ["A"]}')

    def test_missing_summary(self):
        with pytest.raises(FormatError):
            parse_summary_content('{"actionItems": ["A"]}')

    def test_summary_not_a_list(self):
        with pytest.raises(FormatError):
            parse_summary_content('{"summary": "A single string", "actionItems": []}')

    def test_top_level_array(self):
        with pytest.raises(FormatError):
            parse_summary_content('["A", "B"]')

    def test_non_string_items(self):
        with pytest.raises(FormatError):
            parse_summary_content('{"summary": [1, 2], "actionItems": []}')

    def test_error_code(self):
        with pytest.raises(FormatError) as exc_info:
            parse_summary_content("not json")

        assert exc_info.value.code == "FORMAT_ERROR"
