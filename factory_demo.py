import sys
from typing import List, Optional

from common.utils import Logger
from factory_method.configure import configure_dialog


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv

    platform_name: Optional[str] = None
    if len(argv) > 1:
        platform_name = argv[1]

    logger = None
    try:
        logger = Logger("factory_demo")
        dialog = configure_dialog(platform_name)
        logger.log(f"Configured {type(dialog).__name__}")
        dialog.render_window()
    except Exception as e:
        if logger:
            logger.log(f"Factory demo failed: {e}", also_print=True)
        else:
            print(f"Factory demo failed before logger initialization: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
