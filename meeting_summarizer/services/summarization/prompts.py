"""Prompt template for meeting summarization."""

from meeting_summarizer.core.models import ChatMessage, CompletionRequest

SYSTEM_PROMPT = (
    "You are a professional meeting summarizer. "
    "Your task is to analyze meeting transcripts and provide concise summaries "
    "with clear action items. "
    "Return your response in this exact JSON format: "
    '{"summary": ["bullet point 1", "bullet point 2", ...], '
    '"actionItems": ["action item 1", "action item 2", ...]}. '
    "Keep summary points concise and focus on key decisions, important discussions, "
    "and outcomes. Action items should be specific and actionable."
)

USER_PROMPT_PREFIX = (
    "Please summarize this meeting transcript into 8-10 key bullet points "
    "and extract all action items:"
)


def build_user_prompt(transcript: str) -> str:
    """Embed the transcript, unmodified, after the instruction line."""
    return f"{USER_PROMPT_PREFIX}\n\n{transcript}"


def build_completion_request(
    transcript: str,
    model: str,
    temperature: float,
    max_tokens: int,
) -> CompletionRequest:
    """Build the two-message conversation for one transcript.

    Args:
        transcript: The meeting transcript exactly as entered.
        model: Model identifier for the completion endpoint.
        temperature: Sampling temperature.
        max_tokens: Output-length cap.

    Returns:
        A CompletionRequest ready to be serialized as the POST body.
    """
    return CompletionRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=build_user_prompt(transcript)),
        ],
        temperature=temperature,
        max_tokens=max_tokens,
    )
