"""
Badge scanning flow: raw code -> participant id -> profile -> match.

Image capture and QR decoding happen elsewhere; this module starts from
the decoded text.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .data_models import Profile, ScanResult
from .directory import ProfileDirectory
from .exceptions import InvalidScanError, SpeedMatchError
from .matching_models import MatchResult
from .scoring import DEFAULT_CONFIG, MatchConfig, compute_match
from .settings import DEFAULT_QR_PREFIX


logger = logging.getLogger(__name__)


def parse_badge_code(raw: Optional[str], prefix: str = DEFAULT_QR_PREFIX) -> Optional[ScanResult]:
    """Extract the participant id from decoded badge text.

    Prefixed codes (``XRNODE:p003``) yield the suffix; any other text is
    taken as a bare participant id. Returns None when nothing usable remains.
    """
    if not raw:
        return None
    text = raw.strip()
    if prefix and text.startswith(prefix):
        text = text[len(prefix):].strip()
    if not text:
        return None
    return ScanResult(participant_id=text, raw=raw)


@dataclass(frozen=True)
class ScanOutcome:
    scan: ScanResult
    profile: Profile
    match: MatchResult


class ScanSession:
    """Resolves scans for one user until closed.

    Usable as a context manager; ``close()`` is idempotent.
    """

    def __init__(
        self,
        directory: ProfileDirectory,
        current_user: Profile,
        config: MatchConfig = DEFAULT_CONFIG,
        prefix: str = DEFAULT_QR_PREFIX,
    ):
        self.directory = directory
        self.current_user = current_user
        self.config = config
        self.prefix = prefix
        self.history: List[ScanOutcome] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def scan(self, raw: str) -> ScanOutcome:
        """Resolve one decoded code and score it against the current user.

        Raises:
            InvalidScanError: Unusable code, own badge, or session closed.
            ParticipantNotFoundError: The id is not in the directory.
        """
        if self._closed:
            raise InvalidScanError("Scan session is closed", raw=raw)
        result = parse_badge_code(raw, self.prefix)
        if result is None:
            raise InvalidScanError("Unrecognized badge code", raw=raw)
        if result.participant_id == self.current_user.id:
            raise InvalidScanError("Scanned your own badge", raw=raw)
        profile = self.directory.require(result.participant_id)
        outcome = ScanOutcome(scan=result, profile=profile, match=compute_match(self.current_user, profile, self.config))
        self.history.append(outcome)
        logger.info(
            "Scanned %s (%s): score=%d", profile.id, profile.name, outcome.match.score
        )
        return outcome

    def try_scan(self, raw: str) -> Optional[ScanOutcome]:
        """Like ``scan`` but logs and returns None on a failed scan."""
        try:
            return self.scan(raw)
        except SpeedMatchError as e:
            logger.warning("Scan failed: %s", e.message)
            return None

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> "ScanSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
