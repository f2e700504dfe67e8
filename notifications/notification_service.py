from typing import Optional
from models.models import DecodedEmail, ForwardedHeader, TransactionFields
from .telegram_client import TelegramClient
from .notification_composer import NotificationComposer


class TelegramNotificationService:
    """
    Composes the transaction summary and sends it to the Telegram chat.
    """

    def __init__(self, telegram_client: TelegramClient, composer: Optional[NotificationComposer] = None):
        self.telegram_client = telegram_client
        self.composer = composer or NotificationComposer()

    def build_message(self, forwarded: ForwardedHeader, email: DecodedEmail, fields: TransactionFields) -> str:
        sender, subject, date = self.composer.resolve_metadata(forwarded, email)
        return self.composer.craft_message(sender, subject, date, fields)

    async def notify_transaction(self, forwarded: ForwardedHeader, email: DecodedEmail,
                                 fields: TransactionFields) -> Optional[str]:
        message = self.build_message(forwarded, email, fields)
        sent = await self.telegram_client.send_message_async(message)
        return message if sent else None
