"""
Request dispatcher for transcript summarization.

Validates the inputs, sends exactly one completion request and parses the
reply into a ``SummaryResult``.  At most one request is outstanding per
dispatcher; ``is_processing`` reports whether it is pending.
"""

import logging

from meeting_summarizer.core.config import get_settings
from meeting_summarizer.core.exceptions import DispatchInProgressError, ValidationError
from meeting_summarizer.core.models import SummaryResult
from meeting_summarizer.services.completion.client import CompletionClient
from meeting_summarizer.services.summarization.parser import parse_summary_content
from meeting_summarizer.services.summarization.prompts import build_completion_request

logger = logging.getLogger(__name__)


def validate_inputs(transcript: str, credential: str) -> None:
    """Check the required inputs before any network activity.

    Raises:
        ValidationError: ``"transcript required"`` or ``"credential required"``,
            checked in that order.
    """
    if not transcript or not transcript.strip():
        raise ValidationError("transcript required", field="transcript")
    if not credential or not credential.strip():
        raise ValidationError("credential required", field="credential")


class TranscriptSummarizer:
    """Summarizes a whole meeting transcript through the completion endpoint."""

    def __init__(
        self,
        client: CompletionClient | None = None,
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> None:
        settings = get_settings()
        self._client = client or CompletionClient()
        self._model = model or settings.completion_model
        self._temperature = (
            temperature if temperature is not None else settings.completion_temperature
        )
        self._max_tokens = (
            max_tokens if max_tokens is not None else settings.completion_max_tokens
        )
        self._processing = False

    @property
    def is_processing(self) -> bool:
        """True while a dispatched request has not yet settled."""
        return self._processing

    async def summarize(self, transcript: str, credential: str) -> SummaryResult:
        """Summarize ``transcript`` using ``credential`` as the bearer token.

        Args:
            transcript: Meeting transcript, embedded verbatim in the prompt.
            credential: API key for the completion endpoint.

        Returns:
            A SummaryResult built from the model's ``summary`` and
            ``actionItems`` arrays.

        Raises:
            DispatchInProgressError: If a previous request is still pending.
            ValidationError: If the transcript or credential is blank.
            TransportError: If the endpoint is unreachable or returns non-2xx.
            FormatError: If the reply does not parse into the expected shape.
        """
        if self._processing:
            raise DispatchInProgressError()
        validate_inputs(transcript, credential)

        request = build_completion_request(
            transcript,
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

        self._processing = True
        logger.info("Dispatching summarization (%d chars, model=%s)", len(transcript), self._model)
        try:
            content = await self._client.complete(request, credential)
            result = parse_summary_content(content)
        finally:
            self._processing = False

        logger.info(
            "Summarization complete: %d points, %d action items",
            len(result.summary),
            len(result.action_items),
        )
        return result
