from datetime import datetime
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _split_labels(value: Any) -> Any:
    """Accept a delimited string (CSV exports) as well as a list of labels."""
    if value is None:
        return ()
    if isinstance(value, str):
        sep = ";" if ";" in value else ","
        return tuple(part.strip() for part in value.split(sep) if part.strip())
    if isinstance(value, (list, tuple)):
        return tuple(str(v).strip() for v in value if v is not None and str(v).strip())
    return value


class Profile(BaseModel):
    """
    Represents a single attendee at the event.

    Only ``role``, ``skills``, ``interests``, ``location`` and
    ``experience_years`` take part in scoring; the rest is display data.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    id: str = Field(..., min_length=1)
    name: str = ""
    role: str = ""
    company: str = ""
    bio: str = ""
    skills: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    location: Optional[str] = None
    experience_years: Optional[int] = Field(default=None, ge=0, alias="experienceYears")
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    linkedin_url: Optional[str] = Field(default=None, alias="linkedInUrl")

    @field_validator("skills", "interests", mode="before")
    @classmethod
    def _labels(cls, value: Any) -> Any:
        return _split_labels(value)

    @field_validator("location", "image_url", "linkedin_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("name", "role", "company", "bio", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ScanResult(BaseModel):
    """A badge code resolved to a participant id."""

    model_config = ConfigDict(frozen=True)

    participant_id: str
    raw: str
    timestamp: datetime = Field(default_factory=datetime.now)


class Connection(BaseModel):
    """
    An accepted match kept by the connection store.

    Fields:
        id: Generated identifier (``conn_<shortuuid>``).
        profile: Snapshot of the connected attendee.
        match_score: Score computed when the connection was made.
        connected_at: Time of the latest connect.
        appreciation_count: Number of appreciations sent.
    """

    id: str
    profile: Profile
    match_score: int = Field(ge=0, le=100)
    connected_at: datetime = Field(default_factory=datetime.now)
    appreciation_count: int = Field(default=0, ge=0)
