"""Entry point for running graphwalk as a module: ``python -m graphwalk``."""

from .cli import run

if __name__ == "__main__":
    run()
