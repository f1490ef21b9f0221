import json
import logging
from datetime import datetime, timezone


def get_logger(name: str, level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    if logger.handlers:
        return logger
    if level is None:
        logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_event(
    logger: logging.Logger,
    *,
    module: str,
    action: str,
    outcome: str = "ok",
    level: int = logging.DEBUG,
    **context: object,
) -> None:
    if not logger.isEnabledFor(level):
        return
    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": logging.getLevelName(level),
        "module": module,
        "action": action,
        "outcome": outcome,
    }
    payload.update(context)
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))
