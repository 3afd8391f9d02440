"""
adapters.cli.session - Local session credential storage.

Credentials (user_id + JWT access_token) are stored in
~/.gitfit/session.json so the user stays logged in between CLI
invocations. GITFIT_HOME overrides the directory.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path


def _session_file() -> Path:
    home = os.getenv("GITFIT_HOME")
    session_dir = Path(home) if home else Path.home() / ".gitfit"
    return session_dir / "session.json"


@dataclass
class Session:
    user_id: int
    access_token: str
    login: str = ""


def load_session() -> Session | None:
    """Return the stored session, or None if the user is not logged in."""
    path = _session_file()
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return Session(**data)
    except (ValueError, TypeError):
        return None


def save_session(session: Session) -> None:
    """Persist session credentials to disk."""
    path = _session_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(session), indent=2), encoding="utf-8")


def clear_session() -> None:
    """Delete stored credentials (logout)."""
    path = _session_file()
    if path.exists():
        path.unlink()
