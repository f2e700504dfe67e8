import asyncio
import logging
import requests

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


class TelegramClient:
    """Handles HTTP requests to the Telegram Bot API."""

    def __init__(self, bot_token: str, chat_id: str, api_base: str = TELEGRAM_API_BASE, timeout: float = 10.0):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout

    @property
    def send_url(self) -> str:
        return f"{self.api_base}/bot{self.bot_token}/sendMessage"

    def send_message(self, text: str) -> bool:
        """Post a Markdown message to the configured chat. Failures are logged, not retried."""
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "Markdown",
        }
        try:
            resp = requests.post(
                self.send_url,
                headers={"Content-Type": "application/json"},
                json=payload,
                timeout=self.timeout,
            )
        except requests.RequestException:
            logger.exception("Failed to reach Telegram API")
            return False

        if not resp.ok:
            logger.error(f"Telegram API error: {resp.status_code} {resp.reason} - {resp.text}")
            return False
        logger.info(f"Notification sent to chat {self.chat_id}")
        return True

    async def send_message_async(self, text: str) -> bool:
        return await asyncio.to_thread(self.send_message, text)
