from __future__ import annotations

import logging
from typing import Optional, Sequence

from rich.console import Console

from ..common.console import ConsolePrompter
from ..common.formatting import format_currency
from ..common.parsers import parse_int
from ..core.constants import DEFAULT_CURRENCY_SYMBOL, QUIT_SENTINEL
from ..core.exceptions import InputAbortedError, ParseError, ValidationError
from ..payroll.model import PayStub
from ..payroll.service import PayrollService
from .model import Subcontractor
from .service import SubcontractorService

logger = logging.getLogger(__name__)

NAME_PROMPT = f"Contractor name (or '{QUIT_SENTINEL}' to quit): "
NUMBER_PROMPT = "Contractor number: "
START_DATE_PROMPT = "Start date (YYYY-MM-DD): "
SHIFT_PROMPT = "Shift (1=Day, 2=Night): "
RATE_PROMPT = "Hourly pay rate: "
HOURS_PROMPT = "Hours worked this period: "


class SubcontractorConsole:
    """Console session: collect subcontractors, then compute pay for each of them.

    Thin layer: all field rules live in the model, storage in the service.
    """

    def __init__(
        self,
        subcontractors: SubcontractorService,
        payroll: PayrollService,
        prompter: ConsolePrompter,
        *,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ):
        self._subcontractors = subcontractors
        self._payroll = payroll
        self._prompter = prompter
        self._console: Console = prompter.console
        self._currency = currency_symbol

    def say(self, text: str = "") -> None:
        # User-typed names must not be read as markup or emoji codes.
        self._console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def run(self) -> Sequence[PayStub]:
        self.say("=== Subcontractor Factory ===")
        self.say(f"Create as many subcontractors as you like. Type '{QUIT_SENTINEL}' at name prompt to finish.\n")

        self.collect()

        subs = self._subcontractors.list_subcontractors()
        if not subs:
            self.say("\nNo subcontractors created. Exiting...")
            return ()

        self.say(f"\nYou created {len(subs)} subcontractor(s).")
        self.say("Let's compute pay for each based on hours worked this period.\n")

        stubs = self.compute_pay(subs)
        if len(stubs) == len(subs):
            self.say("Subcontractor processing complete. Goodbye!")
        return stubs

    def collect(self) -> None:
        """Create subcontractors until the quit sentinel (or end of input)."""
        while True:
            try:
                sub = self._enter_subcontractor()
            except (ValidationError, ParseError) as exc:
                logger.warning("Subcontractor entry rejected: %s", exc)
                self.say(str(exc))
                self.say("Retry entry.\n")
                continue
            except InputAbortedError as exc:
                logger.warning("Stopped collecting subcontractors: %s", exc)
                return

            if sub is None:
                return

            self.say("Subcontractor created:")
            self.say("   " + sub.describe(self._currency))
            self.say()

    def compute_pay(self, subs: Sequence[Subcontractor]) -> list[PayStub]:
        stubs: list[PayStub] = []
        for sub in subs:
            self.say(sub.describe(self._currency))
            try:
                stub = self._pay_one(sub)
            except InputAbortedError as exc:
                logger.warning("Stopped computing pay after %d of %d: %s", len(stubs), len(subs), exc)
                self.say("Input closed. Stopping pay computation.")
                break

            stubs.append(stub)
            self.say(f"   -> Computed Pay: {format_currency(stub.amount, self._currency)}")
            self.say()
        return stubs

    def _pay_one(self, sub: Subcontractor) -> PayStub:
        while True:
            hours = self._prompter.read_float(
                HOURS_PROMPT,
                predicate=lambda v: v >= 0,
                error_message="Hours must be >= 0.",
            )
            try:
                return self._payroll.compute(sub, hours)
            except ValidationError as exc:
                logger.warning("Pay for #%s rejected: %s", sub.contractor_number, exc)
                self.say(f"{exc}\n")

    def _enter_subcontractor(self) -> Optional[Subcontractor]:
        name = self._prompter.ask(NAME_PROMPT)
        if name.strip().lower() == QUIT_SENTINEL:
            return None

        contractor_number = parse_int(
            self._prompter.ask(NUMBER_PROMPT),
            "Contractor number must be an integer.",
        )
        start_date = self._prompter.read_date(START_DATE_PROMPT)
        shift = self._prompter.read_int(
            SHIFT_PROMPT,
            predicate=lambda v: v in (1, 2),
            error_message="Shift must be 1 or 2.",
        )
        rate = self._prompter.read_float(
            RATE_PROMPT,
            predicate=lambda v: v >= 0,
            error_message="Hourly rate must be >= 0.",
        )

        return self._subcontractors.create(
            name=name,
            contractor_number=contractor_number,
            start_date=start_date,
            shift=shift,
            hourly_pay_rate=rate,
        )
