"""External tool launch descriptions"""
from prompt_edit.core.agents.base_agent import MODEL_SELECTOR_VAR, PROVIDER_KEY_VARS, BaseAgent
from prompt_edit.core.agents.stdio_agent import StdioAgent

__all__ = [
    "BaseAgent",
    "MODEL_SELECTOR_VAR",
    "PROVIDER_KEY_VARS",
    "StdioAgent",
]
