from typing import Tuple
from models.models import DecodedEmail, ForwardedHeader, TransactionFields
from .markdown import escape_markdown

NO_SUBJECT = "(No Subject)"
UNKNOWN_SENDER = "(Unknown Sender)"

# Row labels of the transaction block, in display order.
TRANSACTION_ROWS = [
    ("4 digit Akhir Kartu", "akhir_kartu"),
    ("Merchant/ATM", "merchant"),
    ("Tanggal Transaksi", "tanggal_transaksi"),
    ("Nominal", "nominal"),
]


class NotificationComposer:
    """
    Crafts the Telegram message from extracted fields.
    """

    @staticmethod
    def resolve_metadata(forwarded: ForwardedHeader, email: DecodedEmail) -> Tuple[str, str, str]:
        """
        Prefer the forwarded block's sender/subject/date and fall back to the
        headers of the email that carried it.
        """
        subject = forwarded.subject or email.subject or NO_SUBJECT
        if forwarded.from_:
            sender = forwarded.from_
        elif email.sender:
            sender = email.sender.display()
        else:
            sender = UNKNOWN_SENDER
        date = forwarded.date or ""
        return sender, subject, date

    def craft_message(self, sender: str, subject: str, date: str, fields: TransactionFields) -> str:
        lines = [
            f"📧 *{escape_markdown(sender)}*",
            f"*Subject:* {escape_markdown(subject)}",
        ]
        if date:
            lines.append(f"*Date:* {escape_markdown(date)}")

        lines.append("")
        lines.append("*Detail Transaksi:*")
        for label, attr in TRANSACTION_ROWS:
            lines.append(f"*{label}:* {escape_markdown(getattr(fields, attr))}")
        return "\n".join(lines)
