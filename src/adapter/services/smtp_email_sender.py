import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.app.services.gateways import EmailDeliveryError, IEmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    """Delivers HTML email over SMTP (STARTTLS optional)"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str = "",
        password: str = "",
        sender: str = "",
        use_tls: bool = True,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.use_tls = use_tls
        self.timeout = timeout

    def _build_message(self, address: str, subject: str, html: str) -> MIMEMultipart:
        msg = MIMEMultipart()
        msg["From"] = self.sender
        msg["To"] = address
        msg["Subject"] = subject
        msg.attach(MIMEText(html, "html"))
        return msg

    def _send_sync(self, address: str, subject: str, html: str) -> None:
        msg = self._build_message(address, subject, html)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.sendmail(self.sender, [address], msg.as_string())

    async def send(self, address: str, subject: str, html: str) -> None:
        try:
            await asyncio.to_thread(self._send_sync, address, subject, html)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"SMTP delivery to {self.host}:{self.port} failed: {e}")
            raise EmailDeliveryError(str(e)) from e
