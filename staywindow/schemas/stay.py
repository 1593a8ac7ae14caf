"""Stay schemas."""
from datetime import date

from pydantic import BaseModel, ConfigDict


class Stay(BaseModel):
    """One recorded presence in a territory. Both dates are inclusive.

    ``exit_date`` of None means the subject is still there as of the reference date.
    """

    model_config = ConfigDict(frozen=True)

    entry_date: date
    exit_date: date | None = None
    territory: str
    excluded: bool = False  # voided/erroneous record, never counted
    id: str | None = None

    @property
    def is_ongoing(self) -> bool:
        return self.exit_date is None

    def duration_days(self) -> int:
        """Inclusive day count (entry == exit is one day). Requires an exit date."""
        from staywindow.services.days import inclusive_day_count
        from staywindow.errors import InvalidStayError

        if self.exit_date is None:
            raise InvalidStayError("exit_date", None, "Duration requires an exit date")
        return inclusive_day_count(self.entry_date, self.exit_date)
