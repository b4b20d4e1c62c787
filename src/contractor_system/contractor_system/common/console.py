from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional, TextIO, TypeVar

from rich.console import Console
from rich.prompt import FloatPrompt, InvalidResponse, IntPrompt, Prompt, PromptBase

from ..core.exceptions import InputAbortedError, ParseError
from .datetime_utils import parse_iso_date
from .parsers import parse_float, parse_int

logger = logging.getLogger(__name__)

T = TypeVar("T")

INVALID_DATE_MESSAGE = "Invalid date. Please use YYYY-MM-DD."


class _ConsoleRules:
    """Shared prompt behaviour: labels carry their own suffix, EOF aborts,
    a failed answer prints the message plus a blank line, and the number of
    failed answers can be bounded."""

    prompt_suffix = ""

    def __init__(
        self,
        prompt: str = "",
        *,
        error_message: Optional[str] = None,
        predicate: Optional[Callable[[T], bool]] = None,
        max_attempts: Optional[int] = None,
        **kwargs,
    ):
        super().__init__(prompt, **kwargs)
        if error_message is not None:
            self.validate_error_message = error_message
        self._predicate = predicate
        self._max_attempts = max_attempts or None
        self._attempts = 0

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: Optional[TextIO] = None) -> str:
        try:
            value = super().get_input(console, prompt, password, stream=stream)
        except EOFError as exc:
            raise InputAbortedError("Input closed.") from exc
        # A stream at EOF returns "" rather than raising.
        if stream is not None and not value:
            raise InputAbortedError("Input closed.")
        return value

    def check_value(self, value: T) -> T:
        if self._predicate is not None and not self._predicate(value):
            raise InvalidResponse(self.validate_error_message)
        return value

    def on_validate_error(self, value: str, error: InvalidResponse) -> None:
        logger.debug("Rejected answer %r for %r", value, self.prompt.plain)
        self.console.print(error)
        self.console.print()
        self._attempts += 1
        if self._max_attempts is not None and self._attempts >= self._max_attempts:
            logger.warning("Giving up on %r after %d invalid attempts", self.prompt.plain.strip(), self._attempts)
            raise InputAbortedError(f"Too many invalid attempts ({self._attempts}).")


class TextPrompt(_ConsoleRules, Prompt):
    """Free text, surrounding whitespace removed."""


class WholeNumberPrompt(_ConsoleRules, IntPrompt):
    """Integer answer; Python literal forms such as ``1_000`` are refused."""

    def process_response(self, value: str) -> int:
        try:
            number = parse_int(value)
        except ParseError as exc:
            raise InvalidResponse(self.validate_error_message) from exc
        return self.check_value(number)


class DecimalPrompt(_ConsoleRules, FloatPrompt):
    """Plain decimal answer (no exponent, nan or inf)."""

    def process_response(self, value: str) -> float:
        try:
            number = parse_float(value)
        except ParseError as exc:
            raise InvalidResponse(self.validate_error_message) from exc
        return self.check_value(number)


class DatePrompt(_ConsoleRules, PromptBase[date]):
    response_type = date
    validate_error_message = INVALID_DATE_MESSAGE

    def process_response(self, value: str) -> date:
        try:
            return self.check_value(parse_iso_date(value))
        except ParseError as exc:
            raise InvalidResponse(self.validate_error_message) from exc


class ConsolePrompter:
    """Reads typed values from a rich console, re-prompting until the input is usable.

    ``max_attempts`` bounds every re-prompt loop (None = ask forever). End of
    input and exhausted attempts both raise InputAbortedError. ``stream``
    replaces stdin, for scripted sessions.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        *,
        stream: Optional[TextIO] = None,
        max_attempts: Optional[int] = None,
    ):
        self.console = console or Console()
        self._stream = stream
        self._max_attempts = max_attempts

    def ask(self, label: str) -> str:
        return TextPrompt(label, console=self.console)(stream=self._stream)

    def read_date(self, label: str, error_message: str = INVALID_DATE_MESSAGE) -> date:
        prompt = DatePrompt(label, console=self.console, error_message=error_message, max_attempts=self._max_attempts)
        return prompt(stream=self._stream)

    def read_int(self, label: str, *, predicate: Callable[[int], bool], error_message: str) -> int:
        prompt = WholeNumberPrompt(
            label,
            console=self.console,
            error_message=error_message,
            predicate=predicate,
            max_attempts=self._max_attempts,
        )
        return prompt(stream=self._stream)

    def read_float(self, label: str, *, predicate: Callable[[float], bool], error_message: str) -> float:
        prompt = DecimalPrompt(
            label,
            console=self.console,
            error_message=error_message,
            predicate=predicate,
            max_attempts=self._max_attempts,
        )
        return prompt(stream=self._stream)
