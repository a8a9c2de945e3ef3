"""Message builders for the editor commands."""
from __future__ import annotations

import textwrap
from typing import Optional

from prompt_edit.common.models import Message

SYSTEM_PROMPT = textwrap.dedent("""
    You are a coding assistant embedded in a text editor.
    Answer concisely. When you return code, put it in a single fenced code block
    and keep the surrounding prose short.
""").strip()

CODE_ONLY_RULE = textwrap.dedent("""
    Reply with the complete replacement for the given code in one fenced code block.
    Keep the original indentation. Do not omit unchanged lines.
""").strip()


def _fenced(code: str, language: str) -> str:
    return f"```{language}\n{code}\n```"


def _conversation(user_text: str) -> list[Message]:
    return [
        Message(role="system", content=SYSTEM_PROMPT),
        Message(role="user", content=user_text),
    ]


def build_ask_messages(question: str, code: Optional[str] = None, language: str = "text") -> list[Message]:
    if code:
        return _conversation(f"{question}\n\nContext ({language}):\n{_fenced(code, language)}")
    return _conversation(question)


def build_explain_messages(code: str, language: str) -> list[Message]:
    return _conversation(
        f"Explain what the following {language} code does:\n\n{_fenced(code, language)}"
    )


def build_refactor_messages(code: str, language: str, instruction: str) -> list[Message]:
    instruction = instruction.strip() or "Improve readability without changing behavior."
    return _conversation(
        f"Refactor the following {language} code. {instruction}\n\n"
        f"{CODE_ONLY_RULE}\n\n{_fenced(code, language)}"
    )


def build_fix_messages(code: str, language: str) -> list[Message]:
    return _conversation(
        f"Find and fix the bugs in the following {language} code.\n\n"
        f"{CODE_ONLY_RULE}\n\n{_fenced(code, language)}"
    )
