import logging
import uuid
from typing import Any

import structlog


def configure_logging(level: int | str = logging.INFO, *, json_logs: bool = True) -> None:
    """Configure structlog/standard logging bridge.

    Deployment runs are usually watched from a terminal, so ``json_logs=False``
    switches to the console renderer.
    """

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    renderer: Any = (
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, format="%(message)s")


def bind_run_id(run_id: str | None = None) -> str:
    """Attach a deployment run id to every log line emitted in this context."""
    run_id = run_id or uuid.uuid4().hex[:12]
    structlog.contextvars.bind_contextvars(run_id=run_id)
    return run_id


def clear_run_context() -> None:
    structlog.contextvars.clear_contextvars()
