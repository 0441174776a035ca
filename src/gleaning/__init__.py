# SPDX-License-Identifier: MIT

from gleaning.cleanup import register_cleanup
from gleaning.initialize import initialize
from gleaning.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
