"""Configuración de logging para la CLI.

La librería solo emite registros con `logging.getLogger(__name__)`; quien la
usa decide handlers y niveles. La CLI llama a `configure_logging`.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: str = "WARNING") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    root.addHandler(handler)

    # httpx registra cada petición en INFO (URL incluida).
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
