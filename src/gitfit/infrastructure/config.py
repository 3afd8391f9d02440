"""
infrastructure.config - Typed, injectable configuration.

A frozen dataclass that can be constructed from environment or passed
explicitly in tests.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Centralized configuration for the GitFit API and CLI.

    No module-level globals. Construct via from_env() or pass explicitly
    in tests.
    """
    # Database
    db_path: str = "gitfit.db"

    # JWT
    jwt_secret: str = "change-me-in-production"
    jwt_expiry_hours: int = 24

    # CORS: "*" for development; comma-separated origins in production
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # Built single-page client (index.html + assets). Not served when empty.
    client_dist_dir: str = ""

    @property
    def serves_client(self) -> bool:
        return bool(self.client_dist_dir) and Path(self.client_dist_dir).is_dir()

    @classmethod
    def from_env(cls, project_root: Optional[Path] = None) -> Settings:
        """Build Settings from the environment (and a .env file if present)."""
        from dotenv import load_dotenv
        load_dotenv()

        cors = os.getenv("CORS_ORIGINS", "*")
        origins = [o.strip() for o in cors.split(",") if o.strip()] or ["*"]

        client_dist = os.getenv("CLIENT_DIST_DIR", "")
        if client_dist and project_root is not None and not Path(client_dist).is_absolute():
            client_dist = str(project_root / client_dist)

        return cls(
            db_path=os.getenv("DB_PATH", "gitfit.db"),
            jwt_secret=os.getenv("JWT_SECRET", "change-me-in-production"),
            jwt_expiry_hours=int(os.getenv("JWT_EXPIRY_HOURS", "24")),
            cors_origins=origins,
            client_dist_dir=client_dist,
        )
