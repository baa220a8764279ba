# ============================================
# catalog/notifications.py — Dismissible User Notifications
# ============================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


@dataclass
class Notification:
    message: str
    severity: Severity = Severity.SUCCESS
    open: bool = True


class Notifier:
    """Holds the single notification currently on screen."""

    def __init__(self) -> None:
        self.current: Optional[Notification] = None

    def show(self, message: str, severity: Severity = Severity.SUCCESS) -> Notification:
        self.current = Notification(message, severity)
        return self.current

    def dismiss(self) -> None:
        if self.current is not None:
            self.current.open = False
