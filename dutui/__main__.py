"""Entrypoint for `python -m dutui`."""

from .cli import run


if __name__ == "__main__":
    run()
