"""Meeting Summarizer - paste a transcript, get summary bullets and action items."""

__version__ = "0.1.0"
