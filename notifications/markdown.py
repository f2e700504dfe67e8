import re
from typing import Optional

# Characters with meaning in Telegram's legacy Markdown parse mode.
MARKDOWN_SPECIAL_RE = re.compile(r"([_*`\[])")


def escape_markdown(text: Optional[str]) -> str:
    if not text:
        return ""
    return MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)
