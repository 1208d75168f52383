import json
import logging
import sys
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator

conversion_id_ctx: ContextVar[str | None] = ContextVar("conversion_id", default=None)

# conversion details passed through `extra=`
CONVERSION_FIELDS = ("pair", "amount", "converted_amount", "base_rate", "quote_rate")


class ConversionIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        cid = conversion_id_ctx.get()
        record.conversion_id = cid or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "conversion_id": getattr(record, "conversion_id", "-"),
        }
        for field in CONVERSION_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                base[field] = str(value)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, level: str = "WARNING") -> None:
    root = logging.getLogger()
    root.handlers.clear()
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    root.setLevel(resolved)

    # stdout belongs to the prompts
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(ConversionIdFilter())
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)


@contextmanager
def conversion_context() -> Iterator[str]:
    """Tag every log record emitted during one run-loop iteration."""
    cid = str(uuid.uuid4())
    token = conversion_id_ctx.set(cid)
    logger = logging.getLogger("fxexchange.loop")
    logger.debug("conversion start")
    try:
        yield cid
    finally:
        logger.debug("conversion end")
        conversion_id_ctx.reset(token)
