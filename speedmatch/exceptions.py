"""Error types raised by the peripheral services.

The scoring engine itself never raises; everything here belongs to the
boundaries around it (config, ingest, lookup, scanning).
"""
from typing import Any, Dict, Optional


class SpeedMatchError(Exception):
    """Base exception for speedmatch."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for logging/CLI output."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigError(SpeedMatchError):
    """Raised when a scoring configuration is inconsistent."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["invalid_value"] = str(value)
        super().__init__(message, error_code="CONFIG_ERROR", details=details)


class ProfileValidationError(SpeedMatchError):
    """Raised when a raw record cannot be parsed into a Profile."""

    def __init__(self, message: str, index: Optional[int] = None, errors: Optional[list] = None):
        details: Dict[str, Any] = {}
        if index is not None:
            details["index"] = index
        if errors:
            details["errors"] = errors
        super().__init__(message, error_code="PROFILE_VALIDATION_ERROR", details=details)


class ParticipantNotFoundError(SpeedMatchError):
    """Raised when a participant id does not resolve to a profile."""

    def __init__(self, participant_id: str):
        super().__init__(
            f"Participant not found: {participant_id}",
            error_code="PARTICIPANT_NOT_FOUND",
            details={"participant_id": participant_id},
        )
        self.participant_id = participant_id


class InvalidScanError(SpeedMatchError):
    """Raised when a scanned badge code cannot be used."""

    def __init__(self, message: str, raw: Optional[str] = None):
        details: Dict[str, Any] = {}
        if raw is not None:
            details["raw"] = raw
        super().__init__(message, error_code="INVALID_SCAN", details=details)
