"""
Entry point for ``python -m datecalc``.
"""

from .cli.app import app

if __name__ == "__main__":
    app()
