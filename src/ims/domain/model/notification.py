"""Notifications returned by operations for a presentation layer to show.

Operations hand these back on their results; nothing in the core keeps a
list of active notifications.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationLevel(Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    level: NotificationLevel
    message: str

    @staticmethod
    def info(message: str) -> Notification:
        return Notification(NotificationLevel.INFO, message)

    @staticmethod
    def success(message: str) -> Notification:
        return Notification(NotificationLevel.SUCCESS, message)

    @staticmethod
    def warning(message: str) -> Notification:
        return Notification(NotificationLevel.WARNING, message)

    @staticmethod
    def error(message: str) -> Notification:
        return Notification(NotificationLevel.ERROR, message)
