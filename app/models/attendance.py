from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Float, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base


class Attendance(Base):
    __tablename__ = "attendances"
    __table_args__ = (
        # At most one record per user and calendar day
        UniqueConstraint("user_id", "day", name="uq_attendance_user_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    day = Column(String(10), nullable=False, index=True)  # YYYY-MM-DD, server local date
    check_in = Column(DateTime, nullable=False, default=datetime.now)
    check_out = Column(DateTime, nullable=True)
    worked_hours = Column(Float, nullable=True)

    # Relationships
    user = relationship("User", back_populates="attendances")
