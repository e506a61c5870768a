"""Allow running rmexcept as ``python -m rmexcept``."""

from rmexcept.cli.main import app

if __name__ == "__main__":
    app()
