"""
Pydantic v2 models shared by the service and UI layers.

Completion wire format, SummaryResult, user notifications and the
renderer's view model.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Completion request
# ---------------------------------------------------------------------------


class ChatMessage(BaseModel):
    """One message of the conversation sent to the completion endpoint."""

    role: str
    content: str


class CompletionRequest(BaseModel):
    """POST /chat/completions request body."""

    model: str
    messages: list[ChatMessage]
    temperature: float
    max_tokens: int


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


class SummaryResult(BaseModel):
    """Summary bullets and action items parsed from one completion.

    The model returns ``actionItems`` (camelCase); both the alias and the
    field name are accepted on input. Both lists are required, so a response
    with the wrong shape never yields a half-populated result.
    """

    model_config = ConfigDict(populate_by_name=True)

    summary: list[str]
    action_items: list[str] = Field(alias="actionItems")


class ResultView(BaseModel):
    """What the renderer draws for a SummaryResult."""

    summary_points: list[str] = Field(default_factory=list)
    action_items: list[str] = Field(default_factory=list)
    badge: str = "0"
    show_empty_notice: bool = True


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


class NotificationVariant(StrEnum):
    """Visual style of a toast notification."""

    default = "default"
    destructive = "destructive"


class Notification(BaseModel):
    """A transient message shown to the user after a submit attempt."""

    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.default

    @property
    def is_error(self) -> bool:
        return self.variant == NotificationVariant.destructive
