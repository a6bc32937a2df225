#!/usr/bin/env python
"""Command-line entry point for the exceptional project (migrations, admin, shell)."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Environment variables from .env feed core.config before Django starts
env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(env_path)

from django.core.management import execute_from_command_line


def main() -> None:
    """Run a Django management command."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings.development")
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
