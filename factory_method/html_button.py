from common.config import HTML_BUTTON_LABEL, CLICK_MESSAGE
from common.utils import Logger
from factory_method.button import Button


class HtmlButton(Button):
    """
    Button rendered as an HTML element.
    """

    def __init__(self, label: str = HTML_BUTTON_LABEL):
        self.label = label
        self.clicked = False
        self.logger = Logger("html_button")

    def render(self) -> str:
        rendered = f"<button>{self.label}</button>"
        self.logger.log(f"Rendered HTML button '{self.label}'")
        print(rendered)
        return rendered

    def on_click(self) -> str:
        self.clicked = True
        message = f"Click! Button says - '{CLICK_MESSAGE}'"
        self.logger.log(message, also_print=True)
        return message
