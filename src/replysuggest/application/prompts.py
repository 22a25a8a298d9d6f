"""Prompt construction for reply suggestions."""

import json

from replysuggest.domain.models import EmailContext

SYSTEM_PROMPT = """You are an AI email assistant. Generate exactly 3 professional, contextually appropriate email reply suggestions.
Each suggestion should be concise (1-3 sentences).
Always respond in English, regardless of the language of the email you are replying to.
The email content may be provided as JSON; if so, read its fields as the message being replied to.
Return ONLY a JSON array of strings, nothing else."""

THREAD_DELIMITER = "\n---\n"


def is_json_text(text: str | None) -> bool:
    """Best-effort check: True if the text parses as JSON."""
    if not text:
        return False
    try:
        json.loads(text)
    except (ValueError, RecursionError):
        # Deeply nested input exhausts the decoder; still not usable JSON
        return False
    return True


def build_prompt(context: EmailContext) -> str:
    """Render an email context into the user prompt sent to every provider."""
    prompt = "Generate 3 email reply suggestions based on:\n\n"

    if context.subject:
        prompt += f"Subject: {context.subject}\n"

    if context.body:
        label = "Email Content (JSON format)" if is_json_text(context.body) else "Email Content"
        prompt += f"{label}: {context.body}\n"

    if context.thread_history:
        prompt += f"\nPrevious Messages:\n{THREAD_DELIMITER.join(context.thread_history)}"

    prompt += "\n\nReturn only a JSON array of exactly 3 suggestion strings."

    return prompt
