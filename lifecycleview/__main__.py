"""Entry point for `python -m lifecycleview`."""

import sys


def main():
    from lifecycleview.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
