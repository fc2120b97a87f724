"""Shared utility functions for Meeting Summarizer."""

import re


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences wrapping JSON from LLM responses."""
    text = text.strip()
    if text.startswith("```"):
        text = re.sub(r"^```\w*\n?", "", text)
        text = re.sub(r"\n?```$", "", text)
    return text.strip()


def mask_credential(credential: str) -> str:
    """Return a log-safe form of a secret, e.g. ``sk-...abcd``."""
    credential = credential.strip()
    if len(credential) <= 8:
        return "***"
    return f"{credential[:3]}...{credential[-4:]}"
