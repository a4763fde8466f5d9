from common.config import WINDOWS_BUTTON_LABEL, CLICK_MESSAGE
from common.utils import Logger
from factory_method.button import Button


class WindowsButton(Button):
    """
    Button drawn in the style of a native Windows control.
    """

    def __init__(self, label: str = WINDOWS_BUTTON_LABEL):
        self.label = label
        self.clicked = False
        self.logger = Logger("windows_button")

    def render(self) -> str:
        border = "+" + "-" * (len(self.label) + 2) + "+"
        rendered = f"{border}\n| {self.label} |\n{border}"
        self.logger.log(f"Rendered Windows button '{self.label}'")
        print(rendered)
        return rendered

    def on_click(self) -> str:
        self.clicked = True
        message = f"Click! Button says - '{CLICK_MESSAGE}'"
        self.logger.log(message, also_print=True)
        return message
