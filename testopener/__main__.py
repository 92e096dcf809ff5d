"""Allow running testopener with ``python -m testopener``."""

from .cli.main import app

if __name__ == "__main__":
    app()
