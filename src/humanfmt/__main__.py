"""Allow ``python -m humanfmt``."""

from humanfmt.cli import app

if __name__ == "__main__":
    app()
