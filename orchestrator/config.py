import os
from dotenv import load_dotenv

load_dotenv()

TELEGRAM_CONFIG = {
    "bot_token": os.getenv("TELEGRAM_BOT_TOKEN"),
    "chat_id": os.getenv("TELEGRAM_CHAT_ID"),
    "api_base": os.getenv("TELEGRAM_API_BASE", "https://api.telegram.org"),
    "timeout": float(os.getenv("TELEGRAM_TIMEOUT", "10")),
}

IMAP_CONFIG = {
    "imap_host": os.getenv("IMAP_HOST", "imap.gmail.com"),
    "username": os.getenv("EMAIL_USER"),
    "password": os.getenv("EMAIL_PASS"),
    "mailbox": os.getenv("IMAP_MAILBOX", "INBOX"),
}

POLL_INTERVAL = int(os.getenv("POLL_INTERVAL", "30"))


def imap_configured() -> bool:
    return bool(IMAP_CONFIG["username"] and IMAP_CONFIG["password"])
