"""
Family member model.
Input records come from the member store as camelCase JSON; unknown display
attributes are kept as extras so they pass through layout untouched.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import parse_partner_string


class Member(BaseModel):
    """One person in the tree. Immutable: generation overrides go through model_copy."""
    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    id: str
    name: str = ""
    generation: int = 1
    parents: List[str] = Field(default_factory=list)
    spouse: Optional[str] = None
    partners: List[str] = Field(default_factory=list)
    gender: Optional[str] = None

    birth_date: Optional[str] = Field(None, alias="birthDate")
    death_date: Optional[str] = Field(None, alias="deathDate")
    birth_place: Optional[str] = Field(None, alias="birthPlace")
    occupation: Optional[str] = None
    bio: Optional[str] = None
    photo: Optional[str] = None
    blood_type: Optional[str] = Field(None, alias="bloodType")
    mobile_number: Optional[str] = Field(None, alias="mobileNumber")
    email: Optional[str] = None
    co_parent_name: Optional[str] = Field(None, alias="coParentName")

    @field_validator("generation", mode="before")
    @classmethod
    def _default_generation(cls, v: Any) -> Any:
        # unset / 0 means "top layer"
        return v or 1

    @field_validator("parents", mode="before")
    @classmethod
    def _clean_parents(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, (list, tuple)):
            return [p for p in v if p]
        return v

    @field_validator("partners", mode="before")
    @classmethod
    def _parse_partners(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return parse_partner_string(v)
        return v

    def with_generation(self, generation: int) -> "Member":
        """Copy of this member re-tagged with a display generation."""
        return self.model_copy(update={"generation": generation})

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def coerce_members(items: Optional[List[Any]]) -> List[Member]:
    """Accept Member instances or raw dicts (API / JSON input)."""
    result = []
    for item in items or []:
        if isinstance(item, Member):
            result.append(item)
        else:
            result.append(Member.model_validate(item))
    return result


def index_members(members: List[Member]) -> Dict[str, Member]:
    """id -> member. First occurrence wins if an id is repeated."""
    by_id: Dict[str, Member] = {}
    for m in members:
        by_id.setdefault(m.id, m)
    return by_id
