"""Commit menu shown after a message is generated."""

from enum import Enum
from typing import Callable

from commitgen.output import bold, dim


class Decision(Enum):
    COMMIT = "1"
    EDIT = "2"
    REGENERATE = "3"
    ABORT = "4"


MENU_ITEMS = [
    (Decision.COMMIT, "Commit with this message"),
    (Decision.EDIT, "Edit the message in the editor"),
    (Decision.REGENERATE, "Re-generate the message"),
    (Decision.ABORT, "Abort"),
]


def display_menu(message: str) -> None:
    print(f"Generated commit message: {bold(message)}")
    print("What would you do like to do?")
    for decision, label in MENU_ITEMS:
        print(f"{decision.value}.) {label}")


def parse_decision(choice: str) -> Decision:
    """Map one line of input to a decision. Unknown input aborts, same as 4."""
    choice = choice.strip()
    if choice in (Decision.COMMIT.value, Decision.EDIT.value, Decision.REGENERATE.value):
        return Decision(choice)
    return Decision.ABORT


def read_decision(input_fn: Callable[[str], str] | None = None) -> Decision:
    try:
        choice = (input_fn or input)(dim("> "))
    except (KeyboardInterrupt, EOFError):
        print()
        return Decision.ABORT
    return parse_decision(choice)
