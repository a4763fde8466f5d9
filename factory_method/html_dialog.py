from factory_method.button import Button
from factory_method.dialog import Dialog
from factory_method.html_button import HtmlButton


class HtmlDialog(Dialog):
    def create_button(self) -> Button:
        return HtmlButton()
