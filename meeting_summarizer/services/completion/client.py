"""
Async HTTP client for the external chat-completion endpoint.

Uses ``httpx.AsyncClient`` so the single network round trip is the only
suspension point of a summarization.  Transport failures are translated to
``TransportError`` and malformed envelopes to ``FormatError``; nothing is
retried.
"""

import logging

import httpx

from meeting_summarizer.core.config import get_settings
from meeting_summarizer.core.exceptions import FormatError, TransportError
from meeting_summarizer.core.models import CompletionRequest
from meeting_summarizer.core.utils import mask_credential

logger = logging.getLogger(__name__)

COMPLETIONS_PATH = "/chat/completions"


def extract_message_content(payload: object) -> str:
    """Return ``choices[0].message.content`` from a completion response body.

    Raises:
        FormatError: If the envelope does not have that shape or the content
            is not a string.
    """
    try:
        content = payload["choices"][0]["message"]["content"]  # type: ignore[index]
    except (KeyError, IndexError, TypeError) as exc:
        raise FormatError(f"Completion response missing message content: {exc!r}") from exc
    if not isinstance(content, str):
        raise FormatError(f"Completion message content is not text: {type(content).__name__}")
    return content


class CompletionClient:
    """Sends one chat-completion request per call with a bearer credential.

    The credential is passed per call and never stored on the instance.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Completion service root (falls back to settings).
            timeout: Transport timeout in seconds (falls back to settings).
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``.
        """
        settings = get_settings()
        self._base_url = (base_url or settings.completion_base_url).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def complete(self, request: CompletionRequest, credential: str) -> str:
        """POST the request and return the first choice's message content.

        Args:
            request: Fully built completion request body.
            credential: Bearer token, sent verbatim.

        Returns:
            The raw ``content`` string of the first choice.

        Raises:
            TransportError: On network failure or a non-success status.
            FormatError: If the response body is not the expected envelope.
        """
        headers = {
            "Authorization": f"Bearer {credential}",
            "Content-Type": "application/json",
        }
        logger.debug(
            "POST %s%s (model=%s, key=%s)",
            self._base_url,
            COMPLETIONS_PATH,
            request.model,
            mask_credential(credential),
        )

        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    COMPLETIONS_PATH,
                    json=request.model_dump(),
                    headers=headers,
                )
            except httpx.TimeoutException as exc:
                logger.warning("Completion request timed out: %s", exc)
                raise TransportError(f"Completion request timed out: {exc}") from exc
            except httpx.HTTPError as exc:
                logger.warning("Completion request failed: %s", exc)
                raise TransportError(f"Failed to reach completion endpoint: {exc}") from exc
            except UnicodeEncodeError as exc:
                # Header values must be ASCII
                logger.warning("Completion request headers could not be encoded: %s", exc.reason)
                raise TransportError("Credential contains characters that cannot be sent") from exc

        if not response.is_success:
            logger.warning("Completion endpoint returned HTTP %d", response.status_code)
            raise TransportError(
                f"Completion endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise FormatError(f"Completion response is not JSON: {response.text[:200]}") from exc
        return extract_message_content(payload)
