import logging
import asyncio
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from contextlib import asynccontextmanager, suppress
from orchestrator.config import imap_configured
from orchestrator.email_poller import EmailPollingService
from orchestrator.relay_service import NotificationRelayService

load_dotenv()
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


class EmailRelayApp:
    """
    FastAPI app that accepts inbound raw emails over HTTP and, when IMAP
    credentials are configured, polls a mailbox in the background.
    """

    def __init__(self, relay: NotificationRelayService | None = None, enable_polling: bool | None = None):
        self.app = FastAPI(lifespan=self.lifespan)
        self.relay = relay or NotificationRelayService()
        self.enable_polling = imap_configured() if enable_polling is None else enable_polling
        self.polling_service: EmailPollingService | None = None
        self._poll_task: asyncio.Task | None = None

        self.app.get("/")(self.read_root)
        self.app.post("/email")(self.receive_email)

    async def read_root(self) -> dict[str, str]:
        return {"message": "Bank notification relay running."}

    async def receive_email(self, request: Request) -> dict[str, str]:
        """Accept a raw RFC 822 message as the request body."""
        raw = await request.body()
        message = await self.relay.handle(raw)
        return {"status": "sent" if message is not None else "skipped"}

    @asynccontextmanager
    async def lifespan(self, app: FastAPI):
        try:
            if self.enable_polling:
                logger.info("Starting EmailPollingService...")
                self.polling_service = EmailPollingService(relay=self.relay)
                self._poll_task = asyncio.create_task(self.polling_service.run())
            else:
                logger.info("IMAP not configured; accepting emails over HTTP only.")
            yield
        finally:
            logger.info("Shutting down services...")
            if self._poll_task:
                self._poll_task.cancel()
                with suppress(asyncio.CancelledError):
                    await self._poll_task
                self._poll_task = None


email_relay_app = EmailRelayApp()

app = email_relay_app.app
