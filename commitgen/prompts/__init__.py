"""Prompt Construction Package"""

from commitgen.prompts.builder import PromptBuilder, INSTRUCTION_PREFIX, INSTRUCTION_SUFFIX

__all__ = [
    "PromptBuilder",
    "INSTRUCTION_PREFIX",
    "INSTRUCTION_SUFFIX",
]
