# healthsync/infra/telegram_sender.py

import requests
from healthsync.infra import log_utils

TELEGRAM_API = "https://api.telegram.org"


def send_telegram_message(token: str, chat_id: str, message: str) -> bool:
    """
    Send a plain-text message via the Telegram Bot API.

    Args:
        token: Bot API token (settings.TELEGRAM_TOKEN).
        chat_id: ID of the chat to send to (settings.TELEGRAM_CHAT_ID).
        message: The message text to send.

    Returns:
        True if Telegram accepted the message. Failures are logged, not raised.
    """
    url = f"{TELEGRAM_API}/bot{token}/sendMessage"
    payload = {"chat_id": chat_id, "text": message}
    try:
        response = requests.post(url, json=payload, timeout=20)
        response.raise_for_status()
        log_utils.log_message("Telegram message sent.", "INFO")
        return True
    except requests.RequestException as e:
        log_utils.log_message(f"Telegram send failed: {e}", "ERROR")
        return False
