import sys

from common.config import EventType, DEMO_FILE, LOG_FILE_PATH, ADMIN_EMAIL
from common.utils import Logger
from observer.editor import Editor
from observer.email_notification_listener import EmailNotificationListener
from observer.log_open_listener import LogOpenListener


def main() -> int:
    logger = None
    try:
        logger = Logger("observer_demo")
        editor = Editor()
        editor.events.subscribe(EventType.OPEN, LogOpenListener(LOG_FILE_PATH))
        editor.events.subscribe(EventType.SAVE, EmailNotificationListener(ADMIN_EMAIL))

        editor.open_file(DEMO_FILE)
        editor.save_file()
    except Exception as e:
        if logger:
            logger.log(f"Observer demo failed: {e}", also_print=True)
        else:
            print(f"Observer demo failed before logger initialization: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
