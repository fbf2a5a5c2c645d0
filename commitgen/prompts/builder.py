"""Prompt Builder - Wrap a staged diff in the commit message instruction."""

INSTRUCTION_PREFIX = "Generate a concise commit message for the following git diff:\n"
INSTRUCTION_SUFFIX = "\n\nDO NOT INCLUDE ANYTHING BUT THE COMMIT MESSAGE IN YOUR RESPONSE."


class PromptBuilder:
    """Constructs the user message sent to the completion endpoint."""

    def build(self, diff: str) -> str:
        # Diff goes in verbatim; the endpoint sees exactly what git printed
        return f"{INSTRUCTION_PREFIX}{diff}{INSTRUCTION_SUFFIX}"
