"""Configuración de logs (structlog).

Por qué así:
- La librería solo usa `logging.getLogger(__name__)` y nunca instala handlers.
- Quien ejecuta (la CLI) llama a `configure_logging` y el logging estándar
  pasa por la cadena de structlog (`ProcessorFormatter`).
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter


def get_renderer(debug: bool) -> Any:
    """Console en modo debug, JSON en el resto."""

    if debug:
        return ConsoleRenderer(colors=sys.stderr.isatty())

    # structlog pasa default/sort_keys al serializer.
    def _dumps(obj: Any, default: Any = None, **kwargs: Any) -> str:
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)

    return JSONRenderer(serializer=_dumps)


def configure_logging(*, debug: bool = False) -> None:
    """Configura structlog y enruta el logging estándar por la misma cadena."""

    shared_pre_chain: list[Any] = [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *shared_pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(debug),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    # httpx/httpcore son muy verbosos en DEBUG.
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)