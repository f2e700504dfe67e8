import logging
from typing import Optional, Union

from extractors.forwarded_header_extractor import extract_forwarded_header
from extractors.transaction_extractor import extract_transaction_fields
from notifications.notification_service import TelegramNotificationService
from notifications.telegram_client import TelegramClient
from .config import TELEGRAM_CONFIG
from .email_decoder import decode_email

logger = logging.getLogger(__name__)


class NotificationRelayService:
    """
    Decodes an inbound email, extracts the forwarded header and transaction
    fields, and relays the summary to Telegram.
    """

    def __init__(self, notifier: Optional[TelegramNotificationService] = None):
        if notifier is None and TELEGRAM_CONFIG["bot_token"] and TELEGRAM_CONFIG["chat_id"]:
            notifier = TelegramNotificationService(
                TelegramClient(
                    bot_token=TELEGRAM_CONFIG["bot_token"],
                    chat_id=TELEGRAM_CONFIG["chat_id"],
                    api_base=TELEGRAM_CONFIG["api_base"],
                    timeout=TELEGRAM_CONFIG["timeout"],
                )
            )
        self.notifier = notifier

    async def handle(self, raw: Union[bytes, str]) -> Optional[str]:
        """Process one raw email. Returns the message sent, or None when nothing was sent."""
        if self.notifier is None:
            logger.error("Missing Telegram configuration")
            return None

        try:
            email = decode_email(raw)
            logger.info(f"Processing email from: {email.sender.address if email.sender else 'unknown'} "
                        f"with subject: {email.subject}")

            forwarded = extract_forwarded_header(email.text or email.html or "")
            fields = extract_transaction_fields(email.html or email.text or "")
            return await self.notifier.notify_transaction(forwarded, email, fields)
        except Exception:
            logger.exception("Error parsing email or sending to Telegram")
            return None
