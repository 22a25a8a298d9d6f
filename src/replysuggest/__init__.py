"""AI reply suggestions for email drafts across interchangeable LLM providers."""

__version__ = "0.1.0"
