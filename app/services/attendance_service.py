import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional
from app.core.exceptions import ConflictError, NotFoundError
from app.models.attendance import Attendance
from app.repositories.base import AttendanceRepository
from app.schemas.attendance import AttendanceStats

logger = logging.getLogger(__name__)

MS_PER_HOUR = 3_600_000


def day_key(moment: datetime) -> str:
    """Calendar date of ``moment`` as YYYY-MM-DD (server local clock)."""
    return moment.date().isoformat()


def compute_worked_hours(check_in: datetime, check_out: datetime) -> float:
    """Elapsed time between check-in and check-out in hours, 2 decimals."""
    elapsed_ms = (check_out - check_in) / timedelta(milliseconds=1)
    return round(elapsed_ms / MS_PER_HOUR, 2)


class AttendanceService:
    """
    Daily check-in/check-out ledger.

    Per user and day a record goes NoRecord -> CheckedIn -> CheckedOut.
    Checking in twice on the same day is rejected. Checking out again after a
    check-out is allowed and re-measures from the original check-in.
    """

    def __init__(self, records: AttendanceRepository, clock: Callable[[], datetime] = datetime.now):
        self.records = records
        self.clock = clock

    def check_in(self, user_id: int) -> Attendance:
        now = self.clock()
        today = day_key(now)

        if self.records.get_for_day(user_id, today):
            raise ConflictError("Already checked in today")

        record = self.records.create(user_id=user_id, day=today, check_in=now)
        logger.info(f"Check-in: user={user_id} day={today}")
        return record

    def check_out(self, user_id: int) -> Attendance:
        now = self.clock()
        today = day_key(now)

        record = self.records.get_for_day(user_id, today)
        if not record:
            raise NotFoundError("No check-in found")

        worked_hours = compute_worked_hours(record.check_in, now)
        record = self.records.save_check_out(record, check_out=now, worked_hours=worked_hours)
        logger.info(f"Check-out: user={user_id} day={today} hours={worked_hours}")
        return record

    def today(self, user_id: int) -> Optional[Attendance]:
        return self.records.get_for_day(user_id, day_key(self.clock()))

    def history(self, user_id: int, skip: int = 0, limit: int = 100) -> List[Attendance]:
        return self.records.list_for_user(user_id, skip=skip, limit=limit)

    def stats(self, user_id: int) -> AttendanceStats:
        """Totals over completed days, all time and for the current month."""
        completed = [
            r for r in self.records.list_for_user(user_id, limit=None)
            if r.check_out is not None
        ]

        total_days = len(completed)
        total_hours = sum(r.worked_hours or 0 for r in completed)
        avg_hours = total_hours / total_days if total_days > 0 else 0

        month_prefix = self.clock().strftime("%Y-%m")
        month_records = [r for r in completed if r.day.startswith(month_prefix)]

        return AttendanceStats(
            total_days=total_days,
            total_hours=round(total_hours, 2),
            average_hours_per_day=round(avg_hours, 2),
            current_month_days=len(month_records),
            current_month_hours=round(sum(r.worked_hours or 0 for r in month_records), 2)
        )
