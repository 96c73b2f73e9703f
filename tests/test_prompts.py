"""Tests for prompt building."""

from petai.llm.prompts import MAX_HISTORY_TURNS, exchange_prompt, user_message_prompt


def test_user_message_prompt_structure():
    messages = user_message_prompt("Refactor the parser", ["first", "second"])

    assert [m["role"] for m in messages] == ["system", "user"]
    assert "summary" in messages[0]["content"]
    assert "intent" in messages[0]["content"]
    content = messages[1]["content"]
    assert content.index("- first") < content.index("- second")
    assert content.endswith("Refactor the parser")


def test_history_limited_to_recent_turns():
    history = [f"turn {i}" for i in range(MAX_HISTORY_TURNS + 5)]
    content = user_message_prompt("hi", history)[1]["content"]

    assert "- turn 0\n" not in content
    assert f"- turn {MAX_HISTORY_TURNS + 4}" in content


def test_empty_history_marked():
    content = user_message_prompt("", [])[1]["content"]
    assert "(none)" in content


def test_exchange_prompt_optional_sections():
    bare = exchange_prompt("req", [], [])[1]["content"]
    assert "Project context" not in bare
    assert "Previous state" not in bare

    full = exchange_prompt("req", ["a"], [], "ctx", {"level": 3})[1]["content"]
    assert "Project context:\nctx" in full
    assert 'Previous state:\n{"level": 3}' in full
