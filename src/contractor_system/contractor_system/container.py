from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from rich.console import Console

from .common.console import ConsolePrompter
from .contractors.controller import SubcontractorConsole
from .contractors.repository import InMemorySubcontractorRepository
from .contractors.service import SubcontractorService
from .core.constants import DEFAULT_CURRENCY_SYMBOL
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    subcontractor_service: SubcontractorService
    payroll_service: PayrollService

    console: SubcontractorConsole


def build_container(
    *,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    max_attempts: Optional[int] = None,
) -> Container:
    subcontractor_service = SubcontractorService(InMemorySubcontractorRepository())
    payroll_service = PayrollService()

    prompter = ConsolePrompter(console, stream=stream, max_attempts=max_attempts)
    session = SubcontractorConsole(
        subcontractor_service,
        payroll_service,
        prompter,
        currency_symbol=currency_symbol,
    )

    return Container(
        subcontractor_service=subcontractor_service,
        payroll_service=payroll_service,
        console=session,
    )
