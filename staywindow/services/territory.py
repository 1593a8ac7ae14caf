"""Territory membership checks against a counted-territory set."""
from staywindow.schemas.territory import TerritoryCheck, TerritoryKind
from staywindow.territories import DEFAULT_COUNTED_TERRITORIES, NAME_TO_CODE, TERRITORIES_BY_CODE


def resolve_code(territory: str | None) -> str | None:
    """Map a territory code or known country name to its upper-case code."""
    if not territory or not isinstance(territory, str):
        return None
    normalized = territory.strip().upper()
    if not normalized:
        return None
    if normalized in TERRITORIES_BY_CODE:
        return normalized
    return NAME_TO_CODE.get(normalized, normalized)


def is_counted(territory: str | None, counted: frozenset[str] = DEFAULT_COUNTED_TERRITORIES) -> bool:
    code = resolve_code(territory)
    return code is not None and code in counted


def validate_territory(
    territory: str | None, counted: frozenset[str] = DEFAULT_COUNTED_TERRITORIES
) -> TerritoryCheck:
    """Describe how a territory is treated: counted or not, and why."""
    code = resolve_code(territory)
    if code is None:
        return TerritoryCheck(is_counted=False)
    info = TERRITORIES_BY_CODE.get(code)
    if code in counted:
        return TerritoryCheck(
            is_counted=True,
            code=code,
            name=info.name if info else None,
            is_microstate=bool(info and info.kind == TerritoryKind.microstate),
        )
    if info is None:
        return TerritoryCheck(is_counted=False, code=code)
    reason = info.note if info.kind == TerritoryKind.excluded else "Not in the counted-territory set"
    return TerritoryCheck(is_counted=False, code=code, name=info.name, exclusion_reason=reason)


def counted_territories(counted: frozenset[str] = DEFAULT_COUNTED_TERRITORIES) -> list[TerritoryCheck]:
    """Counted territories sorted by name (unknown codes last, by code)."""
    checks = [validate_territory(code, counted) for code in counted]
    return sorted(checks, key=lambda c: (c.name is None, c.name or "", c.code or ""))
