from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class AttendanceResponse(BaseModel):
    id: int
    user_id: int
    day: str
    check_in: datetime
    check_out: Optional[datetime] = None
    worked_hours: Optional[float] = None

    class Config:
        from_attributes = True


class AttendanceStats(BaseModel):
    total_days: int
    total_hours: float
    average_hours_per_day: float
    current_month_days: int
    current_month_hours: float
