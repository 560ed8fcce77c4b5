"""Per-provider storage of OAuth tokens on disk."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class TokenStore:
    """Keeps an access and a refresh token for each provider in its own file."""

    def __init__(self, config_dir: str | Path) -> None:
        self.config_dir = Path(config_dir)

    def path_for(self, provider: str) -> Path:
        """Return the token file used for ``provider``."""
        return self.config_dir / f"{provider}_tokens.dat"

    def save(self, provider: str, access_token: str, refresh_token: str) -> None:
        """Store both tokens for ``provider``, replacing any earlier ones."""
        path = self.path_for(provider)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        try:
            with path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(f"{access_token}\n{refresh_token}\n")
        except OSError:
            log.warning("cannot write token file: %s", path)

    def load(self, provider: str) -> tuple[str, str] | None:
        """Return ``(access_token, refresh_token)``, or None when nothing usable is stored."""
        path = self.path_for(provider)
        if not path.is_file():
            return None
        try:
            with path.open("r", encoding="utf-8", newline="") as f:
                lines = [f.readline(), f.readline()]
        except OSError:
            return None
        if any(line == "" for line in lines):
            return None
        access_token, refresh_token = (line.removesuffix("\n") for line in lines)
        if not access_token:
            return None
        return access_token, refresh_token

    def clear(self, provider: str) -> None:
        """Remove the stored tokens for ``provider``."""
        self.path_for(provider).unlink(missing_ok=True)