from email.message import EmailMessage
from typing import List

import pytest

from notifications.telegram_client import TelegramClient


FORWARDED_TEXT = (
    "---------- Forwarded message ---------\n"
    "From: digibank <alerts@digibank.co.id>\n"
    "Date: Mon, 1 Jan 2024 10:00\n"
    "Subject: Transaksi Kartu Kredit digibank Anda Berhasil\n"
    "To: me@example.com\n"
)

NOTIFICATION_HTML = (
    "<p>---------- Forwarded message ---------<br>"
    "From: digibank &lt;alerts@digibank.co.id&gt;<br>"
    "Date: Mon, 1 Jan 2024 10:00<br>"
    "Subject: Transaksi Kartu Kredit digibank Anda Berhasil</p>"
    "<p>4 digit Akhir Kartu :&nbsp;1234<br>"
    "Merchant/ATM : <b>STARBUCKS_SENAYAN</b><br>"
    "Tanggal Transaksi : 01/01/2024 09:58<br>"
    "Nominal : Rp 50.000</p>"
)


class FakeTelegramClient(TelegramClient):
    def __init__(self, succeed: bool = True):
        super().__init__(bot_token="test-token", chat_id="42")
        self.succeed = succeed
        self.sent: List[str] = []

    def send_message(self, text: str) -> bool:
        self.sent.append(text)
        return self.succeed


def build_raw_email(text=FORWARDED_TEXT, html=NOTIFICATION_HTML,
                    sender="Me <me@example.com>", subject="Fwd: Transaksi Kartu Kredit") -> bytes:
    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = "relay@example.com"
    msg["Subject"] = subject
    if text is not None:
        msg.set_content(text)
        if html is not None:
            msg.add_alternative(html, subtype="html")
    elif html is not None:
        msg.set_content(html, subtype="html")
    return bytes(msg)


@pytest.fixture
def telegram_client():
    return FakeTelegramClient()


@pytest.fixture
def raw_email():
    return build_raw_email()
