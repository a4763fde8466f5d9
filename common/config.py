# Observer demo
DEMO_FILE = "test.txt"
LOG_FILE_PATH = "./file.txt"
ADMIN_EMAIL = "admin@example.com"

# Factory demo
WINDOWS_BUTTON_LABEL = "Exit"
HTML_BUTTON_LABEL = "Test Button"
CLICK_MESSAGE = "Hello World!"

# Event types
class EventType:
    OPEN = "open"
    SAVE = "save"

# Platforms
class Platform:
    WINDOWS = "Windows"
