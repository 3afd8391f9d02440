"""
Run the GitFit REST API.

Usage:
    python run_api.py

Environment variables (all optional):
    DB_PATH             SQLite database file path (default: gitfit.db)
    JWT_SECRET          Secret key for signing JWT tokens (change in production!)
    JWT_EXPIRY_HOURS    Token lifetime in hours (default: 24)
    CORS_ORIGINS        Comma-separated allowed origins (default: *)
    CLIENT_DIST_DIR     Built single-page client to serve at / (default: none)
    LOG_LEVEL           Logging level (default: INFO)
    PORT                Port to listen on (default: 8000)
"""

import logging
import os
import sys
from pathlib import Path

# Ensure src/ is importable without an install
sys.path.insert(0, str(Path(__file__).parent / "src"))

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "gitfit.adapters.rest.app:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )
