import os
import datetime
import re

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Logger:
    """
    Logger for demo components, writing to text files and optionally printing to console.
    """

    def __init__(self, name: str) -> None:
        logs_dir = os.path.join(project_root, "logs")
        if not os.path.exists(logs_dir):
            os.makedirs(logs_dir)

        self.name = name
        self.log_file = os.path.join(logs_dir, f"{name}.txt")

        with open(self.log_file, 'w') as f:
            timestamp = get_current_time_string()
            f.write(f"[{timestamp}] {name} started\n")

    def log(self, message: str, also_print: bool = False) -> None:
        """
        Log a message to the log file (and optionally print it to the console).
        :param message: Message to log.
        :param also_print: Whether to print the message to console as well.
        """
        timestamp = get_current_time_string()
        log_entry = f"[{timestamp}] {message}\n"

        with open(self.log_file, 'a') as f:
            f.write(log_entry)

        if also_print:
            print(f"[{timestamp}] {message}")


def get_current_time_string() -> str:
    """
    Get the current time as a string formatted HH:MM:SS.
    :return: Current time string.
    """
    return datetime.datetime.now().strftime("%H:%M:%S")


def describe_operation(event_type: str, filename: str) -> str:
    """
    Build the human-readable line listeners report for an editor operation.
    :param event_type: Name of the editor event ("open", "save").
    :param filename: File the operation was performed on.
    :return: Description line.
    """
    return f"Someone has performed {event_type} operation with the following file: {filename}"


def normalize_whitespace(s: str) -> str:
    """
    Normalize whitespace in a string: collapse multiple spaces into a single space and trim.

    :param s: Input string.
    :return: Cleaned-up string.
    """
    return re.sub(r'\s+', ' ', s.strip())
