from replysuggest.application.prompts import SYSTEM_PROMPT, build_prompt, is_json_text
from replysuggest.domain.models import EmailContext


def test_json_body_is_labelled():
    prompt = build_prompt(EmailContext(subject="Re: Invoice", body='{"amount":50}'))

    assert 'Email Content (JSON format): {"amount":50}' in prompt
    assert "Subject: Re: Invoice\n" in prompt


def test_plain_body_uses_plain_label():
    prompt = build_prompt(EmailContext(body="Can we reschedule to Friday?"))

    assert "Email Content: Can we reschedule to Friday?\n" in prompt
    assert "JSON format" not in prompt


def test_malformed_json_body_treated_as_text():
    prompt = build_prompt(EmailContext(body='{"amount": 50'))

    assert 'Email Content: {"amount": 50' in prompt


def test_absent_fields_are_omitted():
    prompt = build_prompt(EmailContext(subject="Meeting"))

    assert "Subject: Meeting" in prompt
    assert "Email Content" not in prompt
    assert "Previous Messages" not in prompt


def test_header_and_closing_instruction():
    prompt = build_prompt(EmailContext(subject="Meeting"))

    assert prompt.startswith("Generate 3 email reply suggestions based on:\n\n")
    assert prompt.endswith("Return only a JSON array of exactly 3 suggestion strings.")


def test_thread_history_joined_with_delimiter():
    context = EmailContext(
        subject="Project",
        thread_history=("First message", "Second message"),
    )

    prompt = build_prompt(context)

    assert "\nPrevious Messages:\nFirst message\n---\nSecond message" in prompt


def test_empty_thread_history_is_omitted():
    prompt = build_prompt(EmailContext(subject="Project", thread_history=()))

    assert "Previous Messages" not in prompt


def test_is_json_text():
    assert is_json_text('["a", "b"]')
    assert is_json_text("42")
    assert not is_json_text("hello there")
    assert not is_json_text("")
    assert not is_json_text(None)


def test_system_prompt_requirements():
    assert "exactly 3" in SYSTEM_PROMPT
    assert "English" in SYSTEM_PROMPT
    assert "JSON" in SYSTEM_PROMPT


def test_deeply_nested_body_treated_as_text():
    body = "[" * 3000 + "]" * 3000

    prompt = build_prompt(EmailContext(subject="x", body=body))

    assert f"Email Content: {body}" in prompt
    assert not is_json_text("[" * 3000)


def test_prompt_and_system_prompt_agree_on_count():
    prompt = build_prompt(EmailContext(subject="Meeting"))

    assert "Generate 3 email reply suggestions" in prompt
    assert "exactly 3 suggestion strings" in prompt
    assert "exactly 3" in SYSTEM_PROMPT
