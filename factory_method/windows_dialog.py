from factory_method.button import Button
from factory_method.dialog import Dialog
from factory_method.windows_button import WindowsButton


class WindowsDialog(Dialog):
    def create_button(self) -> Button:
        return WindowsButton()
