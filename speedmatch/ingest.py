from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from .data_models import Profile
from .exceptions import ProfileValidationError


logger = logging.getLogger(__name__)

FIELD_ALIASES: Dict[str, List[str]] = {
    "id": ["id", "participant_id", "participantId", "Participant ID"],
    "name": ["name", "Name", "Your name"],
    "role": ["role", "Role", "Job title"],
    "company": ["company", "Company", "Where do you work?"],
    "bio": ["bio", "Bio", "summary"],
    "skills": ["skills", "Skills"],
    "interests": ["interests", "Interests"],
    "location": ["location", "Location", "Where are you based?"],
    "experience_years": ["experience_years", "experienceYears", "Years of experience"],
    "image_url": ["image_url", "imageUrl"],
    "linkedin_url": ["linkedin_url", "linkedInUrl", "Your LinkedIn URL"],
}


def get_alias_column(df: pd.DataFrame, key: str) -> Optional[str]:
    for candidate in FIELD_ALIASES.get(key, []):
        if candidate in df.columns:
            return candidate
    return None


def resolve_aliases(df: pd.DataFrame) -> Dict[str, Optional[str]]:
    return {key: get_alias_column(df, key) for key in FIELD_ALIASES}


def clean_profiles_df(df: pd.DataFrame) -> pd.DataFrame:
    """Map aliased headers to the Profile field names and blank out NaNs."""
    out = df.copy()
    out.columns = [col.strip() if isinstance(col, str) else col for col in out.columns]
    alias_map = resolve_aliases(out)
    renamed = pd.DataFrame(index=out.index)
    for key, col in alias_map.items():
        if col is not None:
            renamed[key] = out[col]
    renamed = renamed.astype(object).where(pd.notnull(renamed), None)
    if "id" in renamed.columns:
        renamed["id"] = renamed["id"].apply(lambda v: None if v is None else str(v).strip())
    return renamed


def parse_profile(record: Dict[str, Any], index: Optional[int] = None) -> Profile:
    """Validate one raw record into a Profile.

    Raises:
        ProfileValidationError: If the record does not satisfy the Profile schema.
    """
    if not isinstance(record, dict):
        raise ProfileValidationError(
            f"Profile record must be an object, got {type(record).__name__}", index=index
        )
    try:
        return Profile.model_validate(record)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        where = f" at index {index}" if index is not None else ""
        raise ProfileValidationError(f"Invalid profile{where}", index=index, errors=errors) from e


def parse_profiles(records: List[Dict[str, Any]]) -> List[Profile]:
    return [parse_profile(record, index=i) for i, record in enumerate(records)]


def load_profiles_csv(csv_path: Path) -> List[Profile]:
    df = clean_profiles_df(pd.read_csv(csv_path, dtype=str))
    return parse_profiles(df.to_dict(orient="records"))


def load_profiles_json(json_path: Path) -> List[Profile]:
    with Path(json_path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and "participants" in data:
        data = data["participants"]
    if not isinstance(data, list):
        raise ProfileValidationError(f"Expected a list of profiles in {json_path}")
    return parse_profiles(data)


def load_profiles(path: Path) -> List[Profile]:
    """Load attendee profiles from a .json or .csv file.

    Args:
        path: Data file. JSON holds a list of objects (or ``{"participants": [...]}``);
            CSV columns may use any header in ``FIELD_ALIASES``.

    Returns:
        Validated profiles in file order.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        profiles = load_profiles_csv(path)
    elif suffix == ".json":
        profiles = load_profiles_json(path)
    else:
        raise ProfileValidationError(f"Unsupported profile file type: {path.suffix or path.name}")
    logger.info("Loaded %d profiles from %s", len(profiles), path)
    return profiles
