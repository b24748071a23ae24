"""
Notification side-channel.

Notifications are best effort. A notifier that is unsupported or was denied
permission silently does nothing; callers check capability, never errors.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from healthsync.config import settings
from healthsync.infra import log_utils
from healthsync.infra.telegram_sender import send_telegram_message


class Notifier(ABC):
    @abstractmethod
    def is_supported(self) -> bool:
        pass

    def request_permission(self) -> bool:
        """Ask for permission to notify. Most backends need none."""
        return self.is_supported()

    def notify(self, title: str, body: str) -> bool:
        """Deliver a notification if possible. Returns whether it was sent."""
        if not self.is_supported() or not self.request_permission():
            return False
        return self._send(title, body)

    @abstractmethod
    def _send(self, title: str, body: str) -> bool:
        pass


class NullNotifier(Notifier):
    """A host without any notification capability."""

    def is_supported(self) -> bool:
        return False

    def _send(self, title: str, body: str) -> bool:
        return False


class ConsoleNotifier(Notifier):
    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def is_supported(self) -> bool:
        return True

    def _send(self, title: str, body: str) -> bool:
        self.write(f"🔔 {title}: {body}")
        return True


class TelegramNotifier(Notifier):
    """Sends notifications to a Telegram chat when credentials are configured."""

    def __init__(self, token: Optional[str] = None, chat_id: Optional[str] = None):
        self.token = token if token is not None else settings.TELEGRAM_TOKEN
        self.chat_id = chat_id if chat_id is not None else settings.TELEGRAM_CHAT_ID

    def is_supported(self) -> bool:
        return bool(self.token and self.chat_id)

    def _send(self, title: str, body: str) -> bool:
        return send_telegram_message(self.token, self.chat_id, f"{title}\n{body}")


def default_notifier() -> Notifier:
    notifier = TelegramNotifier()
    if notifier.is_supported():
        return notifier
    log_utils.log_message("Telegram not configured; notifications go to the console.", "INFO")
    return ConsoleNotifier()
