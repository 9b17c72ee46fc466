# SPDX-License-Identifier: MIT

from weekline.cleanup import register_cleanup
from weekline.initialize import initialize
from weekline.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
