"""Prompt templates for message and exchange analysis."""

import json

from petai.llm.base import PriorState

# Only the most recent turns are sent
MAX_HISTORY_TURNS = 10

USER_MESSAGE_SYSTEM = (
    "You analyze messages a developer sends to a coding assistant. "
    "Reply with a JSON object with exactly two string fields: "
    '"summary" (one short sentence describing the request) and '
    '"intent" (a short lowercase label such as "feature", "bugfix", '
    '"refactor", "question", "review" or "other").'
)

EXCHANGE_SYSTEM = (
    "You analyze one exchange between a developer and a coding assistant: "
    "the developer's request and the actions the assistant took. "
    "Reply with a single JSON object. Include a string field \"summary\" "
    "describing what happened and any other fields the caller's format asks for."
)


def _format_history(session_history: list[str]) -> str:
    recent = session_history[-MAX_HISTORY_TURNS:]
    if not recent:
        return "(none)"
    return "\n".join(f"- {turn}" for turn in recent)


def user_message_prompt(user_message: str, session_history: list[str]) -> list[dict[str, str]]:
    """Build chat messages for analyze_user_message."""
    content = (
        f"Recent session history (oldest first):\n{_format_history(session_history)}\n\n"
        f"User message:\n{user_message}"
    )
    return [
        {"role": "system", "content": USER_MESSAGE_SYSTEM},
        {"role": "user", "content": content},
    ]


def exchange_prompt(
    user_request: str,
    actions: list[str],
    session_history: list[str],
    project_context: str | None = None,
    prior_state: PriorState | None = None,
) -> list[dict[str, str]]:
    """Build chat messages for analyze_exchange."""
    action_lines = "\n".join(f"{i}. {a}" for i, a in enumerate(actions, 1)) or "(none)"
    sections = [
        f"Recent session history (oldest first):\n{_format_history(session_history)}",
        f"User request:\n{user_request}",
        f"Assistant actions:\n{action_lines}",
    ]
    if project_context:
        sections.append(f"Project context:\n{project_context}")
    if prior_state:
        sections.append(f"Previous state:\n{json.dumps(dict(prior_state), default=str)}")

    return [
        {"role": "system", "content": EXCHANGE_SYSTEM},
        {"role": "user", "content": "\n\n".join(sections)},
    ]
