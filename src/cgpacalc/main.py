import sys

from cgpacalc.app import main


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
