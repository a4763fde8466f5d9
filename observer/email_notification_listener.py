from typing import List

from common.patterns import EventListener
from common.utils import Logger, describe_operation


class EmailNotificationListener(EventListener):
    """
    Notifies an e-mail address about editor events.
    Messages are reported through the logger instead of being delivered.
    """

    def __init__(self, email: str):
        self.email = email
        self.sent_messages: List[str] = []
        self.logger = Logger("email_notification_listener")

    def update(self, event_type: str, filename: str) -> None:
        message = f"Email to {self.email}: {describe_operation(event_type, filename)}"
        self.sent_messages.append(message)
        self.logger.log(message, also_print=True)
