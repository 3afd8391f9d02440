"""
Run the GitFit CLI.

Usage:
    python run_cli.py [COMMAND] [OPTIONS]

Examples:
    python run_cli.py register
    python run_cli.py log-food "Greek yogurt" --calories 100 --protein 17 --meal breakfast
    python run_cli.py water
    python run_cli.py summary --date 2024-03-01

Environment variables (all optional):
    DB_PATH             SQLite database file path (default: gitfit.db)
    JWT_SECRET          Secret key for signing JWT tokens
    GITFIT_HOME         Where the login session is kept (default: ~/.gitfit)
"""

import sys
from pathlib import Path

# Ensure src/ is importable without an install
sys.path.insert(0, str(Path(__file__).parent / "src"))

from gitfit.adapters.cli.main import app

if __name__ == "__main__":
    app()
