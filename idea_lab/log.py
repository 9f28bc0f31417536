"""
Logging setup with optional structured JSON output.
"""
import json
import logging
from datetime import datetime, timezone
from typing import Optional


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "extra"):
            log_obj.update(record.extra)
        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj)


def configure_logging(level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """
    Attach a single stream handler to the ``idea_lab`` logger.

    Safe to call on every Streamlit rerun: an existing handler is reused
    and only its level and formatter are updated.
    """
    logger = logging.getLogger("idea_lab")
    handler: Optional[logging.Handler] = next(
        (h for h in logger.handlers if getattr(h, "_idea_lab", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._idea_lab = True
        logger.addHandler(handler)

    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
