import re

TAG_RE = re.compile(r"<[^>]*>")
WHITESPACE_RE = re.compile(r"\s+")

# Decoded on the sender fallback path only, in this order.
SENDER_ENTITIES = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)


class TextCleaner:
    @staticmethod
    def clean(text: str) -> str:
        """Drop tags, turn &nbsp; into a space and trim. No other entity is decoded."""
        return TAG_RE.sub("", text).replace("&nbsp;", " ").strip()

    @staticmethod
    def strip_tags(text: str) -> str:
        return TAG_RE.sub("", text).strip()

    @staticmethod
    def clean_sender(text: str) -> str:
        """
        Fallback for a sender line with no email address in it: tags become
        spaces, whitespace collapses, then &lt; &gt; &amp; are decoded.
        """
        cleaned = WHITESPACE_RE.sub(" ", TAG_RE.sub(" ", text)).strip()
        for entity, char in SENDER_ENTITIES:
            cleaned = cleaned.replace(entity, char)
        return cleaned
