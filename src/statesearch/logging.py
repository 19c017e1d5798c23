from __future__ import annotations

import json as _json
import logging
import sys

# Attributes the engines attach to their records through ``extra=``.
SEARCH_FIELDS = ("engine", "event", "round", "bound", "exp", "gen", "open")


def search_fields(engine: str, event: str, **values: object) -> dict[str, object]:
    """Build the ``extra`` mapping for an engine log record."""
    return {"engine": engine, "event": event, **values}


class JsonFormatter(logging.Formatter):
    """One JSON object per record; search fields become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, object] = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for key in SEARCH_FIELDS:
            if hasattr(record, key):
                value = getattr(record, key)
                # json has no literal for inf
                if isinstance(value, float) and value in (float("inf"), float("-inf")):
                    value = str(value)
                data[key] = value
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(data, ensure_ascii=False)


def get_logger(
    name: str = "statesearch", level: int = logging.INFO, json: bool = False
) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    if json:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
    logger.addHandler(handler)
    return logger
