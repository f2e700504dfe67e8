import re
import logging
from typing import Dict, List, Optional, Tuple

from models.models import TransactionFields
from .base import Extractor
from .utils.text_cleaner import TextCleaner

logger = logging.getLogger(__name__)

# A value ends at the first line break tag, paragraph close, &nbsp; or newline.
VALUE_UNTIL_BREAK = r"(.*?)(?:<br|</p>|&nbsp;|\n|$)"
CARD_SUFFIX = r"(?:&nbsp;)?\s*([0-9]{4})"


def _label(phrase: str) -> str:
    return r"\s*".join(re.escape(word) for word in phrase.split())


# (field, label phrase, value rule)
TRANSACTION_FIELDS: List[Tuple[str, str, str]] = [
    ("akhir_kartu", "4 digit Akhir Kartu", CARD_SUFFIX),
    ("merchant", "Merchant/ATM", VALUE_UNTIL_BREAK),
    ("tanggal_transaksi", "Tanggal Transaksi", VALUE_UNTIL_BREAK),
    ("nominal", "Nominal", VALUE_UNTIL_BREAK),
]


class TransactionFieldExtractor(Extractor):
    """
    Pulls card suffix, merchant, transaction date and amount out of a bank
    notification body by anchoring on their labels. Fields that are not
    found keep the "N/A" default.
    """

    def __init__(self, fields: Optional[List[Tuple[str, str, str]]] = None):
        self.patterns = [
            (name, re.compile(rf"{_label(phrase)}\s*:\s*{rule}", re.IGNORECASE))
            for name, phrase, rule in (fields or TRANSACTION_FIELDS)
        ]

    def extract(self, content: str) -> TransactionFields:
        if not content:
            return TransactionFields()

        found: Dict[str, str] = {}
        for name, pattern in self.patterns:
            match = pattern.search(content)
            if match and match.group(1):
                found[name] = TextCleaner.clean(match.group(1))

        missing = [name for name, _ in self.patterns if name not in found]
        if missing:
            logger.debug("Transaction fields not found: %s", missing)
        return TransactionFields(**found)


_default_extractor = TransactionFieldExtractor()


def extract_transaction_fields(html: str) -> TransactionFields:
    return _default_extractor.extract(html)
