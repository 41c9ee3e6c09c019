"""Allow running as ``python -m find_biggest_file``."""

from find_biggest_file.cli import app

app()
