"""Turns a typed line into a command object."""

import re
from typing import TypeVar

from pydantic import ValidationError

from diet_book.command_models import (
    AddArguments,
    CatalogArguments,
    CommandArguments,
    DateRangeArguments,
    DeleteArguments,
    InfoArguments,
)
from diet_book.diet_commands import CommandWord
from diet_book.errors import InvalidCommandError
from diet_book.services.commands import (
    AddCommand,
    CalculateCommand,
    CatalogCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    HelpCommand,
    HistoryCommand,
    InfoCommand,
    ListCommand,
    SaveCommand,
    UserInfoCommand,
)

_PREFIX_PATTERN = re.compile(r"(?<!\S)([a-z])/")

ArgumentsT = TypeVar("ArgumentsT", bound=CommandArguments)


def parse_command(line: str) -> Command:
    """Parse one line of user input."""
    word, _, rest = line.strip().partition(" ")
    if not word:
        raise InvalidCommandError("Please enter a command. Type 'help' to see them.")
    command_word = CommandWord.lookup(word)
    if command_word is None:
        raise InvalidCommandError(
            f"Sorry, '{word}' is not a command. Type 'help' to see them."
        )
    rest = rest.strip()

    if command_word is CommandWord.ADD:
        arguments = _validate(AddArguments, split_prefixed(rest, AddArguments.PREFIXES))
        return AddCommand(arguments)
    if command_word is CommandWord.DELETE:
        delete = _validate(DeleteArguments, {"index": rest})
        return DeleteCommand(delete.index)
    if command_word is CommandWord.HISTORY:
        window = _validate(
            DateRangeArguments, split_prefixed(rest, DateRangeArguments.PREFIXES)
        )
        return HistoryCommand(start=window.start, end=window.end)
    if command_word is CommandWord.CALCULATE:
        window = _validate(
            DateRangeArguments, split_prefixed(rest, DateRangeArguments.PREFIXES)
        )
        return CalculateCommand(start=window.start, end=window.end)
    if command_word is CommandWord.CATALOG:
        catalog = _validate(
            CatalogArguments, split_prefixed(rest, CatalogArguments.PREFIXES)
        )
        return CatalogCommand(store=catalog.store)
    if command_word is CommandWord.INFO:
        updates = _validate(InfoArguments, split_prefixed(rest, InfoArguments.PREFIXES))
        return InfoCommand(updates)

    if rest:
        raise InvalidCommandError(f"'{command_word.value.word}' takes no arguments.")
    simple_commands: dict[CommandWord, type[Command]] = {
        CommandWord.HELP: HelpCommand,
        CommandWord.LIST: ListCommand,
        CommandWord.CLEAR: ClearCommand,
        CommandWord.USERINFO: UserInfoCommand,
        CommandWord.SAVE: SaveCommand,
        CommandWord.EXIT: ExitCommand,
    }
    return simple_commands[command_word]()


def split_prefixed(text: str, prefixes: dict[str, str]) -> dict[str, str]:
    """Split ``a/one b/two words`` into field values keyed by field name.

    A value runs until the next known prefix, so values may contain spaces.
    Unknown prefixes are kept as part of the surrounding value.
    """
    matches = [
        match
        for match in _PREFIX_PATTERN.finditer(text)
        if match.group(1) in prefixes
    ]
    if text.strip() and (not matches or text[: matches[0].start()].strip()):
        raise InvalidCommandError(
            f"Could not understand '{text.strip()}'. Arguments look like x/VALUE."
        )
    values: dict[str, str] = {}
    for position, match in enumerate(matches):
        end = matches[position + 1].start() if position + 1 < len(matches) else None
        field_name = prefixes[match.group(1)]
        if field_name in values:
            raise InvalidCommandError(f"{match.group(1)}/ was given more than once.")
        values[field_name] = text[match.end() : end].strip()
    return values


def _validate(model: type[ArgumentsT], values: dict[str, str]) -> ArgumentsT:
    try:
        return model.model_validate(values)
    except ValidationError as exc:
        raise InvalidCommandError(_format_validation_error(exc)) from exc


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = " ".join(str(part).replace("_", " ") for part in error["loc"])
        message = error["msg"].removeprefix("Value error, ")
        problems.append(f"{location}: {message}" if location else message)
    return "Invalid input. " + "; ".join(problems)
