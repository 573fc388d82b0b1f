"""Email executor and its (simulated) transport."""

import html
import itertools
from abc import ABC, abstractmethod

from pydantic import BaseModel, Field, ValidationError

from actionitems.execution.models import ExecutionOutcome
from actionitems.executors.base import ActionExecutor
from actionitems.items.models import ActionItem, ActionType
from actionitems.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SENDER = '"Action Items System" <noreply@actionitems.com>'


class EmailMessage(BaseModel):
    """An outgoing message as handed to the transport."""

    sender: str
    to: list[str] = Field(..., min_length=1)
    subject: str
    text: str = ""
    html: str = ""


class EmailTransport(ABC):
    """Delivers messages and returns a delivery identifier."""

    @abstractmethod
    async def send(self, message: EmailMessage) -> str:
        pass


class InMemoryEmailTransport(EmailTransport):
    """Transport that records messages instead of delivering them."""

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self._counter = itertools.count(1)

    async def send(self, message: EmailMessage) -> str:
        self.sent.append(message)
        message_id = f"mock-{next(self._counter)}"
        logger.info(
            "mock_email_sent",
            message_id=message_id,
            recipients=message.to,
            subject=message.subject,
        )
        return message_id


def render_html(subject: str, body: str) -> str:
    """Render the HTML alternative for an action item email."""
    return (
        '<div style="font-family: Arial, sans-serif; padding: 20px;">'
        f'<h2 style="color: #333;">{html.escape(subject)}</h2>'
        f'<p style="color: #666; line-height: 1.6;">{html.escape(body)}</p>'
        '<hr style="border: none; border-top: 1px solid #ddd; margin: 20px 0;">'
        '<p style="color: #999; font-size: 12px;">'
        "This email was sent automatically by Action Items Management System"
        "</p></div>"
    )


class EmailExecutor(ActionExecutor):
    """Sends the email described by ``emailTo``/``emailSubject``/``emailBody``.

    Missing recipients or subject, and any transport error, are reported
    as failed outcomes.
    """

    action_type = ActionType.EMAIL

    def __init__(self, transport: EmailTransport, sender: str = DEFAULT_SENDER) -> None:
        self._transport = transport
        self._sender = sender

    async def execute(self, item: ActionItem) -> ExecutionOutcome:
        logger.info("executing_email_action", item_id=item.id)

        recipients = item.metadata.get("emailTo")
        if isinstance(recipients, str):
            recipients = [recipients]
        if not recipients:
            return ExecutionOutcome.failed("Email recipients are required")

        subject = item.metadata.get("emailSubject")
        if not subject:
            return ExecutionOutcome.failed("Email subject is required")

        body = item.metadata.get("emailBody") or item.description
        try:
            message = EmailMessage(
                sender=self._sender,
                to=list(recipients),
                subject=subject,
                text=body,
            )
        except (ValidationError, TypeError) as e:
            logger.warning("email_details_invalid", item_id=item.id, error=str(e))
            return ExecutionOutcome.failed(f"Email details are malformed: {e}")
        message.html = render_html(message.subject, message.text)

        try:
            message_id = await self._transport.send(message)
        except Exception as e:
            logger.warning("email_send_failed", item_id=item.id, error=str(e))
            return ExecutionOutcome.failed(str(e) or type(e).__name__)

        logger.info("email_sent", item_id=item.id, message_id=message_id)
        return ExecutionOutcome.ok(messageId=message_id, recipients=message.to)
