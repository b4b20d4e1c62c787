from __future__ import annotations

import logging
from typing import Optional, TextIO

from dotenv import load_dotenv
from rich.console import Console

from config import load_settings

from .container import Container, build_container

logger = logging.getLogger(__name__)


def create_app(*, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> Container:
    load_dotenv(override=False)
    settings = load_settings()

    # Logs go to stderr so they never interleave with the prompts on stdout.
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if settings.debug:
        logger.debug("[contractor-system] settings=%s", settings)

    return build_container(
        console=console,
        stream=stream,
        currency_symbol=settings.currency_symbol,
        max_attempts=settings.max_attempts,
    )


def main() -> None:
    container = create_app()
    container.console.run()


if __name__ == "__main__":
    main()
