"""Tests for prompt templates and the prompt registry."""

from agnes.llm.prompts import (
    PromptRegistry,
    PromptTemplate,
    actionable_extraction_prompt,
    appointment_scheduling_prompt,
    family_summary_prompt,
    todo_extraction_prompt,
)


def _echo(params) -> str:
    return f"hello {params['name']}|{params['missing']}"


# -- Registry -----------------------------------------------------------------


def test_register_and_get() -> None:
    reg = PromptRegistry()
    prompt = PromptTemplate(id="greet", description="Greet", renderer=_echo)
    reg.register(prompt)
    assert reg.get("greet") is prompt


def test_get_unknown_returns_none() -> None:
    assert PromptRegistry().get("nope") is None


def test_list_preserves_insertion_order() -> None:
    reg = PromptRegistry()
    for prompt_id in ("b", "a", "c"):
        reg.register(PromptTemplate(id=prompt_id, description="", renderer=_echo))
    assert [p.id for p in reg.list()] == ["b", "a", "c"]


# -- Rendering ---------------------------------------------------------------


def test_missing_params_render_as_empty_string() -> None:
    prompt = PromptTemplate(id="greet", description="", renderer=_echo)
    assert prompt.render({"name": "Ada"}) == "hello Ada|"
    assert prompt.render({}) == "hello |"
    assert prompt.render(None) == "hello |"


def test_none_params_render_as_empty_string() -> None:
    prompt = PromptTemplate(id="greet", description="", renderer=_echo)
    assert prompt.render({"name": None}) == "hello |"


def test_render_is_deterministic() -> None:
    params = {"sourceText": "Buy milk", "timezone": "Europe/Oslo", "contextJson": "{}"}
    for prompt in (
        actionable_extraction_prompt,
        appointment_scheduling_prompt,
        family_summary_prompt,
        todo_extraction_prompt,
    ):
        assert prompt.render(params) == prompt.render(dict(params))


def test_actionable_extraction_defaults() -> None:
    text = actionable_extraction_prompt.render({"sourceText": "Dentist at 9"})
    assert "Locale: en-US" in text
    assert "Timezone: UTC" in text
    assert text.endswith("Input:\nDentist at 9")
    assert "Known family context" not in text


def test_actionable_extraction_includes_context_and_language() -> None:
    text = actionable_extraction_prompt.render({
        "sourceText": "x",
        "context": "- Emma plays soccer",
        "language": "Norwegian",
        "locale": "nb-NO",
    })
    assert "- Emma plays soccer" in text
    assert "Norwegian" in text
    assert "Locale: nb-NO" in text


def test_family_summary_placeholders() -> None:
    text = family_summary_prompt.render({"familyName": "The Hansens", "periodLabel": "today"})
    assert "for The Hansens covering today" in text
    assert text.count("None") == 4


def test_appointment_prompt_unknown_fallbacks() -> None:
    text = appointment_scheduling_prompt.render({"userMessage": "Book a haircut"})
    assert "(none)" in text
    assert "(unknown)" in text
    assert text.endswith("Book a haircut")
