from abc import ABC, abstractmethod

from factory_method.button import Button


class Dialog(ABC):
    """
    Creator side of the Factory Method pattern.
    render_window is fixed; subclasses only decide which button gets created.
    """

    def render_window(self) -> Button:
        """
        Create the dialog's button, draw it and wire its click handler.
        :return: The button the dialog created.
        """
        ok_button = self.create_button()
        ok_button.render()
        ok_button.on_click()
        return ok_button

    @abstractmethod
    def create_button(self) -> Button:
        """
        Factory method. Subclasses return their platform's button.
        :return: A new button instance.
        """
        pass
