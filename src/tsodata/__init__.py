# SPDX-License-Identifier: MIT

from tsodata.cleanup import register_cleanup
from tsodata.initialize import initialize
from tsodata.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
