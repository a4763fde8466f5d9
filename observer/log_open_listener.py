from common.patterns import EventListener
from common.utils import Logger, describe_operation


class LogOpenListener(EventListener):
    """Appends a line to a log file for every event it is subscribed to."""

    def __init__(self, log_path: str):
        self.log_path = log_path
        self.logger = Logger("log_open_listener")

    def update(self, event_type: str, filename: str) -> None:
        line = describe_operation(event_type, filename)
        with open(self.log_path, 'a') as f:
            f.write(line + "\n")
        self.logger.log(f"Save to log {self.log_path}: {line}", also_print=True)
