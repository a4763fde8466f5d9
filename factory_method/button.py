from abc import ABC, abstractmethod


class Button(ABC):
    """
    Common interface for all buttons a dialog can create.
    """

    @abstractmethod
    def render(self) -> str:
        """
        Draw the button.
        :return: The rendered button.
        """
        pass

    @abstractmethod
    def on_click(self) -> str:
        """
        Bind and fire the button's click handler.
        :return: The message produced by the click.
        """
        pass
