"""
Forwarded-message header extraction.

Mail clients insert a block like

    ---------- Forwarded message ---------
    Dari: Bank <alerts@bank.co.id>
    Date: Mon, 1 Jan 2024
    Subject: Transaksi Kartu Kredit

when a message is forwarded. The original sender, date and subject are
pulled out of that block so the relayed summary shows the bank, not the
person who forwarded it.
"""

import re
import logging
from typing import Callable, Dict, List, Optional, Tuple

from models.models import ForwardedHeader
from .base import Extractor
from .utils.text_cleaner import TextCleaner

logger = logging.getLogger(__name__)

LINE_BREAK_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
EMAIL_RE = re.compile(r"([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")


def _sender_value(raw: str) -> str:
    email_match = EMAIL_RE.search(raw)
    if email_match:
        return email_match.group(1)
    return TextCleaner.clean_sender(raw)


def _label_pattern(labels: List[str]) -> re.Pattern:
    alternatives = "|".join(labels)
    return re.compile(rf"(?:{alternatives}):[^\S\r\n]*(.*?)(?:\r?\n|$)", re.IGNORECASE)


# (field, label alternatives, value cleaner); first match wins per field.
HEADER_FIELDS: List[Tuple[str, List[str], Callable[[str], str]]] = [
    ("from_", ["Dari", "From"], _sender_value),
    ("date", ["Date", "Tanggal", "Sent"], TextCleaner.strip_tags),
    ("subject", ["Subject"], TextCleaner.strip_tags),
]


class ForwardedHeaderExtractor(Extractor):
    def __init__(self, fields: Optional[List[Tuple[str, List[str], Callable[[str], str]]]] = None):
        self.patterns = [
            (name, _label_pattern(labels), cleaner)
            for name, labels, cleaner in (fields or HEADER_FIELDS)
        ]

    def extract(self, content: str) -> ForwardedHeader:
        normalized = LINE_BREAK_RE.sub("\n", content or "")

        found: Dict[str, str] = {}
        for name, pattern, cleaner in self.patterns:
            match = pattern.search(normalized)
            if match:
                found[name] = cleaner(match.group(1))

        if found:
            logger.debug("Forwarded header fields found: %s", sorted(found))
        return ForwardedHeader(**found)


_default_extractor = ForwardedHeaderExtractor()


def extract_forwarded_header(content: str) -> ForwardedHeader:
    return _default_extractor.extract(content)
