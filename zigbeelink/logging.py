import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional, Union

from zigbeelink.config import get_settings

LOGGER_NAME = "zigbeelink"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)


def create_logger(name: str, ring_size: int, level: Union[int, str] = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level.upper())


def get_events() -> List[Dict]:
    for handler in get_logger().handlers:
        if isinstance(handler, RingBufferHandler):
            return handler.get_events()
    return []


def summarize_payload(data: Optional[bytes], limit: int = 32) -> str:
    if not data:
        return ""
    shown = bytes(data[:limit]).hex()
    if len(data) > limit:
        return f"{shown}... ({len(data)} bytes)"
    return shown
