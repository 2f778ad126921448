"""
SMTP Issue Notifier

Sends issue reports to the support mailbox with the standard-library SMTP
client, run in a worker thread.
"""

from email.message import EmailMessage
import smtplib

import anyio.to_thread

from movie_booking.platform.exception.exceptions import NotifyError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_issue_notifier import IIssueNotifier


class SmtpIssueNotifierImpl(IIssueNotifier):
    def __init__(
        self,
        *,
        host: str,
        port: int,
        sender: str,
        password: str,
        recipient: str = '',
        starttls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.password = password
        self.recipient = recipient or sender
        self.starttls = starttls
        self.timeout = timeout

    def _build_message(self, *, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message['From'] = self.sender
        message['To'] = self.recipient
        message['Subject'] = subject
        message.set_content(body)
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.starttls:
                smtp.starttls()
            if self.password:
                smtp.login(self.sender, self.password)
            smtp.send_message(message)

    @Logger.io
    async def send_issue_report(self, *, subject: str, body: str) -> None:
        message = self._build_message(subject=subject, body=body)
        try:
            await anyio.to_thread.run_sync(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            Logger.base.error(f'❌ [MAIL] Failed to send "{subject}" to {self.recipient}: {e}')
            raise NotifyError('Error sending email') from e

        Logger.base.info(f'📧 [MAIL] Sent "{subject}" to {self.recipient}')
