# topmark:header:start
#
#   project      : AdventRun
#   file         : cli_types.py
#   file_relpath : src/adventrun/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for AdventRun.

The day and part types delegate to the core validators so that the CLI and
programmatic callers reject the same values with the same messages.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, Protocol, TypeVar, cast

import click

from adventrun.constants import MAX_DAY, MIN_DAY, PARTS
from adventrun.core.errors import ArgumentError
from adventrun.core.request import validate_day, validate_part

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


def _fail_noreturn(
    message: str,
    param: click.Parameter | None,
    ctx: click.Context | None,
) -> NoReturn:
    """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
    raise click.BadParameter(message, param=param, ctx=ctx)


class ValidatedIntParam(ParamTypeBase):
    """An integer parameter checked by a core validator.

    Args:
        name (str): Type name shown by Click.
        validator (Callable[[str | int], int]): Core validator raising ArgumentError.
        choices (tuple[int, ...]): Values offered for shell completion.
    """

    def __init__(
        self,
        name: str,
        validator: Callable[[str | int], int],
        choices: tuple[int, ...],
    ) -> None:
        self.name = name
        self.validator = validator
        self.choices = choices

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> int:
        """Convert and validate the raw value."""
        try:
            return self.validator(value)
        except ArgumentError as exc:
            _fail_noreturn(exc.message, param, ctx)

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_ADVENTRUN_COMPLETE=bash_source adventrun)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        return [RuntimeCompletionItem(str(c)) for c in self.choices if str(c).startswith(incomplete)]


DAY = ValidatedIntParam("day", validate_day, tuple(range(MIN_DAY, MAX_DAY + 1)))
PART = ValidatedIntParam("part", validate_part, PARTS)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in self.enum_cls
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        _fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )
