"""Territory registry schemas."""
import enum

from pydantic import BaseModel, ConfigDict


class TerritoryKind(str, enum.Enum):
    member = "member"
    microstate = "microstate"
    excluded = "excluded"


class TerritoryInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    kind: TerritoryKind
    since: str | None = None  # accession date (ISO); informational only
    note: str | None = None


class TerritoryCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_counted: bool
    code: str | None = None
    name: str | None = None
    exclusion_reason: str | None = None
    is_microstate: bool = False
