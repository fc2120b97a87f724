"""
Completion module - HTTP access to the external chat-completion service.
"""

from .client import CompletionClient, extract_message_content

__all__ = ["CompletionClient", "extract_message_content"]
