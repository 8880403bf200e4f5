from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .data_models import Profile
from .exceptions import ParticipantNotFoundError
from .ingest import load_profiles, parse_profiles
from .sample_profiles import SAMPLE_PARTICIPANTS


logger = logging.getLogger(__name__)


class ProfileDirectory:
    """In-memory attendee lookup.

    Holds an immutable snapshot of profiles keyed by id; later duplicates of
    an id replace earlier ones.
    """

    def __init__(self, profiles: Iterable[Profile]):
        self._profiles: Dict[str, Profile] = {}
        for profile in profiles:
            if profile.id in self._profiles:
                logger.warning("Duplicate participant id %s; keeping the last record", profile.id)
            self._profiles[profile.id] = profile

    @classmethod
    def sample(cls) -> "ProfileDirectory":
        return cls(parse_profiles(SAMPLE_PARTICIPANTS))

    @classmethod
    def from_file(cls, path: Path) -> "ProfileDirectory":
        return cls(load_profiles(path))

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._profiles

    def get(self, participant_id: str) -> Optional[Profile]:
        return self._profiles.get(participant_id)

    def require(self, participant_id: str) -> Profile:
        profile = self.get(participant_id)
        if profile is None:
            raise ParticipantNotFoundError(participant_id)
        return profile

    def all(self) -> List[Profile]:
        return list(self._profiles.values())

    def others(self, participant_id: str) -> List[Profile]:
        return [p for p in self._profiles.values() if p.id != participant_id]

    def search(self, query: str) -> List[Profile]:
        """Case-insensitive substring search over name, role, company, skills and interests."""
        q = (query or "").strip().lower()
        if not q:
            return self.all()

        def hit(p: Profile) -> bool:
            return (
                q in p.name.lower()
                or q in p.role.lower()
                or q in p.company.lower()
                or any(q in s.lower() for s in p.skills)
                or any(q in i.lower() for i in p.interests)
            )

        return [p for p in self._profiles.values() if hit(p)]
