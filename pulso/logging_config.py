"""Configuração de logging do processo com saída formatada pelo ``rich``."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", *, console: Console | None = None) -> None:
    """Instala um ``RichHandler`` como destino único dos logs do processo."""

    handler = RichHandler(
        console=console or Console(stderr=True),
        markup=False,
        rich_tracebacks=True,
        show_path=False,
    )
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


__all__ = ["configure_logging"]
