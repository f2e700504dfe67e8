"""
Email Poller Service using IMAP

Connects to a mailbox over IMAP/SSL, fetches unread messages as raw RFC 822
bytes, hands each one to the notification relay, and marks it as read.
"""

import asyncio
import imaplib
import logging
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .config import IMAP_CONFIG, POLL_INTERVAL
from .relay_service import NotificationRelayService

logger = logging.getLogger(__name__)
load_dotenv()


# ------------------------- IMAP Email Client ------------------------- #
class ImapEmailClient:
    def __init__(self, imap_host: str, username: str, password: str, mailbox: str = "INBOX"):
        self.imap_host = imap_host
        self.username = username
        self.password = password
        self.mailbox = mailbox

    def _connect(self) -> imaplib.IMAP4_SSL:
        conn = imaplib.IMAP4_SSL(self.imap_host)
        try:
            conn.login(self.username, self.password)
        except imaplib.IMAP4.error as e:
            self._logout(conn)
            raise RuntimeError(f"IMAP login failed for {self.username}: {e}") from e

        try:
            status, _ = conn.select(self.mailbox)
        except imaplib.IMAP4.error as e:
            self._logout(conn)
            raise RuntimeError(f"Failed to select mailbox {self.mailbox}: {e}") from e
        if status != "OK":
            self._logout(conn)
            raise RuntimeError(f"Failed to select mailbox {self.mailbox}")
        return conn

    @staticmethod
    def _logout(conn: imaplib.IMAP4_SSL) -> None:
        try:
            conn.logout()
        except (imaplib.IMAP4.error, OSError):
            logger.warning("IMAP logout failed", exc_info=True)

    def fetch_unread_emails(self) -> List[Tuple[bytes, bytes]]:
        """Fetch unseen messages as (uid, raw bytes) and mark them as read."""
        conn = self._connect()
        try:
            status, data = conn.uid("search", None, "UNSEEN")
            if status != "OK":
                logger.error(f"Failed to search mailbox: {data}")
                return []

            emails = []
            for uid in data[0].split():
                status, msg_data = conn.uid("fetch", uid, "(RFC822)")
                if status != "OK" or not msg_data or not isinstance(msg_data[0], tuple):
                    logger.error(f"Failed to fetch message {uid!r}")
                    continue
                emails.append((uid, msg_data[0][1]))
                self.mark_as_read(conn, uid)

            logger.info(f"Fetched {len(emails)} unread emails.")
            return emails
        finally:
            self._logout(conn)

    def mark_as_read(self, conn: imaplib.IMAP4_SSL, uid: bytes) -> bool:
        status, _ = conn.uid("store", uid, "+FLAGS", "(\\Seen)")
        if status == "OK":
            return True
        logger.error(f"Failed to mark email {uid!r} as read")
        return False


# ------------------------- Email Polling Service ------------------------- #
class EmailPollingService:
    def __init__(
        self,
        poll_interval: int = POLL_INTERVAL,
        email_client: Optional[ImapEmailClient] = None,
        relay: Optional[NotificationRelayService] = None,
    ):
        self.poll_interval = poll_interval

        if email_client is None:
            if not IMAP_CONFIG["username"] or not IMAP_CONFIG["password"]:
                raise ValueError("IMAP username or password not set in environment variables")
            email_client = ImapEmailClient(
                imap_host=IMAP_CONFIG["imap_host"],
                username=IMAP_CONFIG["username"],
                password=IMAP_CONFIG["password"],
                mailbox=IMAP_CONFIG["mailbox"],
            )
        self.email_client = email_client
        self.relay = relay or NotificationRelayService()

    async def poll_once(self) -> int:
        """Relay every unread email once. Returns how many were sent."""
        try:
            emails = await asyncio.to_thread(self.email_client.fetch_unread_emails)
        except Exception:
            logger.exception("Failed to fetch emails")
            return 0

        sent = 0
        for uid, raw in emails:
            logger.info(f"Relaying email {uid!r}")
            if await self.relay.handle(raw) is not None:
                sent += 1
        return sent

    async def run(self) -> None:
        while True:
            logger.info("Polling for new emails...")
            await self.poll_once()
            await asyncio.sleep(self.poll_interval)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    service = EmailPollingService()
    asyncio.run(service.run())
