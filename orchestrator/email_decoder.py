"""
Turns raw RFC 822 bytes into the handful of fields the relay needs:
subject, sender, plain-text body and HTML body.
"""

import email
import logging
from email import policy
from email.headerregistry import Address
from email.message import EmailMessage
from typing import Optional, Union

from models.models import DecodedEmail, EmailSender

logger = logging.getLogger(__name__)


def _body(msg: EmailMessage, subtype: str) -> Optional[str]:
    part = msg.get_body(preferencelist=(subtype,))
    if part is None:
        return None
    try:
        return part.get_content()
    except (LookupError, UnicodeDecodeError):
        # Unknown or lying charset; fall back to a lossy decode.
        payload = part.get_payload(decode=True) or b""
        return payload.decode("utf-8", errors="replace")


def _sender(msg: EmailMessage) -> Optional[EmailSender]:
    header = msg.get("From")
    if header is None:
        return None
    addresses = getattr(header, "addresses", ())
    if not addresses:
        return EmailSender(name=str(header))
    first: Address = addresses[0]
    return EmailSender(name=first.display_name, address=first.addr_spec)


def decode_email(raw: Union[bytes, str]) -> DecodedEmail:
    if isinstance(raw, str):
        msg = email.message_from_string(raw, policy=policy.default)
    else:
        msg = email.message_from_bytes(raw, policy=policy.default)

    subject = msg.get("Subject")
    decoded = DecodedEmail(
        subject=str(subject) if subject is not None else None,
        sender=_sender(msg),
        text=_body(msg, "plain"),
        html=_body(msg, "html"),
    )
    logger.debug(
        "Decoded email subject=%r text=%s html=%s",
        decoded.subject, decoded.text is not None, decoded.html is not None,
    )
    return decoded
