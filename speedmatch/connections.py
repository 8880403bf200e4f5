"""Best-effort persistence of accepted matches.

Connections live in a single JSON file. Reads never fail: a missing,
unreadable or corrupt file is treated as an empty store.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import shortuuid
from pydantic import TypeAdapter, ValidationError

from .data_models import Connection, Profile


logger = logging.getLogger(__name__)

_CONNECTIONS = TypeAdapter(List[Connection])


def generate_connection_id() -> str:
    """Generate a short UUID based connection identifier."""
    return f"conn_{shortuuid.uuid()}"


class ConnectionStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> List[Connection]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            if not raw.strip():
                return []
            return _CONNECTIONS.validate_json(raw)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Ignoring unreadable connection store %s (%s)", self.path, e)
            return []

    def _persist(self, connections: List[Connection]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(_CONNECTIONS.dump_json(connections, indent=2))

    def save(self, profile: Profile, match_score: int) -> Connection:
        """Store a connection, or refresh score and timestamp if one exists for this profile."""
        connections = self._load()
        for i, existing in enumerate(connections):
            if existing.profile.id == profile.id:
                updated = existing.model_copy(
                    update={"match_score": match_score, "connected_at": datetime.now()}
                )
                connections[i] = updated
                self._persist(connections)
                logger.info("Updated connection %s with %s", updated.id, profile.id)
                return updated
        connection = Connection(
            id=generate_connection_id(),
            profile=profile,
            match_score=match_score,
            connected_at=datetime.now(),
        )
        connections.append(connection)
        self._persist(connections)
        logger.info("Saved connection %s with %s", connection.id, profile.id)
        return connection

    def all(self) -> List[Connection]:
        return self._load()

    def is_connected(self, profile_id: str) -> bool:
        return self.get_by_profile_id(profile_id) is not None

    def get_by_profile_id(self, profile_id: str) -> Optional[Connection]:
        return next((c for c in self._load() if c.profile.id == profile_id), None)

    def remove(self, connection_id: str) -> bool:
        connections = self._load()
        kept = [c for c in connections if c.id != connection_id]
        if len(kept) == len(connections):
            return False
        self._persist(kept)
        return True

    def send_appreciation(self, profile_id: str) -> Optional[Connection]:
        connections = self._load()
        for i, existing in enumerate(connections):
            if existing.profile.id == profile_id:
                updated = existing.model_copy(
                    update={"appreciation_count": existing.appreciation_count + 1}
                )
                connections[i] = updated
                self._persist(connections)
                return updated
        return None

    def count(self) -> int:
        return len(self._load())

    def sorted_by_score(self) -> List[Connection]:
        return sorted(self._load(), key=lambda c: c.match_score, reverse=True)

    def sorted_by_date(self) -> List[Connection]:
        return sorted(self._load(), key=lambda c: c.connected_at, reverse=True)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()

    def export_json(self) -> str:
        return _CONNECTIONS.dump_json(self._load(), indent=2).decode("utf-8")
