import logging
import json
import sys
import time
import uuid
import os

class _C:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"


def _use_color() -> bool:
    # Color only if explicitly enabled and terminal supports it.
    return os.getenv("LOG_COLOR", "0") == "1" and sys.stdout.isatty()

def _event_color(event_type: str) -> str:
    et = (event_type or "").upper()
    if "FAILED" in et or "ERROR" in et:
        return _C.RED
    if "IMPROVISED" in et or "WARNING" in et:
        return _C.YELLOW
    if "STARTED" in et:
        return _C.GREEN
    if "GENERATED" in et or "COMPLETED" in et:
        return _C.GREEN
    if "WRITTEN" in et:
        return _C.CYAN
    return _C.MAGENTA

def get_logger():
    logger = logging.getLogger("hiveddl")
    if logger.handlers:
        return logger

    level = logging.getLevelName(os.getenv("HIVEDDL_LOG_LEVEL", "INFO").upper())
    # Unknown names come back as "Level X" strings
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter('%(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger

logger = get_logger()

# Request ID Generator
def generate_request_id():
    return str(uuid.uuid4())

# Structured Log Event
def log_event(event_type: str, payload: dict, level: int = logging.INFO):
    record = {"event_type": event_type, **payload}
    text = json.dumps(record, default=str)

    if _use_color():
        color = _event_color(event_type)
        logger.log(level, f"{color}{text}{_C.RESET}")
    else:
        logger.log(level, text)

# Timer Utility
class RequestTimer:
    """
    Simple execution timer.
    """
    def __init__(self):
        self.start_time = time.time()

    def duration(self):
        return round(time.time() - self.start_time, 4)
