"""
Entry point for running translate-gherkin as a module.

Usage:
    python -m translate_gherkin --help
    python -m translate_gherkin translate features/ --dialect de
    python -m translate_gherkin dialects
"""
from .cli import app


if __name__ == "__main__":
    app()
