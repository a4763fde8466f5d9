from typing import Optional

from common.config import EventType
from common.patterns import EventManager
from common.utils import Logger


class NoFileOpenError(RuntimeError):
    """Raised when the editor is asked to save before any file was opened."""


class Editor:
    """
    Text editor stand-in that publishes "open" and "save" events to its subscribers.
    """

    def __init__(self):
        self.events: EventManager = EventManager(EventType.OPEN, EventType.SAVE)
        self.file: Optional[str] = None
        self.logger = Logger("editor")

    def open_file(self, filename: str) -> None:
        """
        Open a file and notify "open" subscribers.
        :param filename: Name of the file being opened.
        :return: None
        """
        self.file = filename
        self.logger.log(f"Opened {filename}")
        self.events.notify(EventType.OPEN, filename)

    def save_file(self) -> None:
        """
        Save the current file and notify "save" subscribers.
        :raises NoFileOpenError: If no file has been opened yet.
        :return: None
        """
        if self.file is None:
            raise NoFileOpenError("Please open a file first.")
        self.logger.log(f"Saved {self.file}")
        self.events.notify(EventType.SAVE, self.file)
