from __future__ import annotations

from abc import ABC, abstractmethod

from .message import NotificationPayload


class BaseNotifier(ABC):
    @abstractmethod
    async def send(self, payload: NotificationPayload) -> bool:
        """Send notification. Returns True if successful."""
        raise NotImplementedError
