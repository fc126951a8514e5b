"""Command word definitions and help text."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class DietCommand:
    """Declarative command definition."""

    word: str
    usage: str
    description: str


class CommandWord(Enum):
    """Enum of typed commands (single source of truth)."""

    HELP = DietCommand("help", "help", "Show this list of commands")
    ADD = DietCommand(
        "add",
        "add [x/PORTION] n/NAME [k/CALORIE] [c/CARBOHYDRATE] [p/PROTEIN] [f/FAT]"
        " [s/STORE] [t/YYYY-MM-DDTHH:MM]",
        "Log a food you ate; without macros it is looked up in the catalog",
    )
    CATALOG = DietCommand(
        "catalog", "catalog [s/STORE]", "Show the foods you can add by name"
    )
    LIST = DietCommand("list", "list", "Show every logged food")
    HISTORY = DietCommand(
        "history",
        "history [s/START] [e/END]",
        "Show dated entries in time order",
    )
    DELETE = DietCommand("delete", "delete INDEX", "Delete a logged food")
    CLEAR = DietCommand("clear", "clear", "Delete every logged food")
    CALCULATE = DietCommand(
        "calculate",
        "calculate [s/START] [e/END]",
        "Total calories and macros eaten",
    )
    INFO = DietCommand(
        "info",
        "info [n/NAME] [g/GENDER] [a/AGE] [h/HEIGHT] [o/ORIGINAL] [c/CURRENT]"
        " [t/TARGET] [l/LEVEL]",
        "Update your profile",
    )
    USERINFO = DietCommand("userinfo", "userinfo", "Show your profile")
    SAVE = DietCommand("save", "save", "Save your profile and food list")
    EXIT = DietCommand("exit", "exit", "Save and quit")

    @classmethod
    def lookup(cls, word: str) -> "CommandWord | None":
        """Return the command for a typed word, if any."""
        cleaned = word.strip().lower()
        for entry in cls:
            if entry.value.word == cleaned:
                return entry
        return None


def help_text() -> str:
    """Return the command list formatted for display."""
    return "\n".join(
        f"  {entry.value.usage}\n      {entry.value.description}"
        for entry in CommandWord
    )
