import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

logger = logging.getLogger(__name__)


class NotificationLevel(str, enum.Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notification:
    """Transient user-facing message"""
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=datetime.utcnow)


class NotificationCenter:
    """Collects notifications raised by pages until the shell displays them"""

    def __init__(self):
        self._items: List[Notification] = []

    def _push(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self._items.append(notification)
        log = logger.warning if level == NotificationLevel.ERROR else logger.info
        log(f"[{level.value}] {message}")
        return notification

    def success(self, message: str) -> Notification:
        return self._push(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._push(NotificationLevel.ERROR, message)

    def info(self, message: str) -> Notification:
        return self._push(NotificationLevel.INFO, message)

    @property
    def items(self) -> List[Notification]:
        return list(self._items)

    def messages(self, level: NotificationLevel = None) -> List[str]:
        return [n.message for n in self._items if level is None or n.level == level]

    def drain(self) -> List[Notification]:
        """Return pending notifications and forget them"""
        items, self._items = self._items, []
        return items
