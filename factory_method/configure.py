import platform
from typing import Optional

from common.config import Platform
from factory_method.dialog import Dialog
from factory_method.html_dialog import HtmlDialog
from factory_method.windows_dialog import WindowsDialog


def configure_dialog(platform_name: Optional[str] = None) -> Dialog:
    """
    Pick the concrete dialog for the current platform.
    :param platform_name: Platform to configure for. Defaults to the running OS.
    :return: WindowsDialog on Windows, HtmlDialog everywhere else.
    """
    if platform_name is None:
        platform_name = platform.system()

    if platform_name.strip().lower() == Platform.WINDOWS.lower():
        return WindowsDialog()
    return HtmlDialog()
