"""Per-browser-session state and the submit handler.

``SummarizerSession`` owns the user's inputs and the latest result, and turns
every submit attempt into exactly one ``Notification``.  Failures are
reported generically; the previous result is kept.

Usage::

    session = SummarizerSession()
    session.credential = "sk-..."
    session.transcript = "Alice: ..."
    notification = await session.submit()
"""

import logging

from meeting_summarizer.core.exceptions import MeetingSummarizerError, ValidationError
from meeting_summarizer.core.models import Notification, NotificationVariant, SummaryResult
from meeting_summarizer.services.summarization.dispatcher import TranscriptSummarizer

logger = logging.getLogger(__name__)

TRANSCRIPT_REQUIRED = Notification(
    title="Transcript Required",
    description="Please paste a meeting transcript to summarize.",
    variant=NotificationVariant.destructive,
)
CREDENTIAL_REQUIRED = Notification(
    title="API Key Required",
    description="Please enter your OpenAI API key to process the transcript.",
    variant=NotificationVariant.destructive,
)
SUMMARY_GENERATED = Notification(
    title="Summary Generated",
    description="Your meeting has been successfully summarized.",
)
PROCESSING_FAILED = Notification(
    title="Processing Failed",
    description="Failed to process the transcript. Please check your API key and try again.",
    variant=NotificationVariant.destructive,
)


class SummarizerSession:
    """Input state, current result and submit handler for one UI session.

    Args:
        summarizer: Dispatcher to use (a default ``TranscriptSummarizer`` if omitted).
    """

    def __init__(self, summarizer: TranscriptSummarizer | None = None) -> None:
        self._summarizer = summarizer or TranscriptSummarizer()
        self.credential: str = ""
        self.transcript: str = ""
        self.result: SummaryResult | None = None

    @property
    def is_processing(self) -> bool:
        return self._summarizer.is_processing

    async def submit(self) -> Notification:
        """Validate, dispatch and store the result.

        Returns:
            The notification to show for this attempt.
        """
        try:
            result = await self._summarizer.summarize(self.transcript, self.credential)
        except ValidationError as exc:
            logger.info("Submit rejected: %s", exc.detail)
            if exc.field == "credential":
                return CREDENTIAL_REQUIRED
            return TRANSCRIPT_REQUIRED
        except MeetingSummarizerError as exc:
            logger.warning("Summarization failed [%s]: %s", exc.code, exc.detail)
            return PROCESSING_FAILED
        except Exception:
            logger.exception("Unexpected error during summarization")
            return PROCESSING_FAILED

        self.result = result
        return SUMMARY_GENERATED
