from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from app.schemas.attendance import AttendanceResponse, AttendanceStats
from app.api.deps import get_attendance_service, get_current_user_id
from app.services.attendance_service import AttendanceService

router = APIRouter(prefix="/check", tags=["Attendance"])


@router.post("/in", response_model=AttendanceResponse)
async def check_in(
    user_id: int = Depends(get_current_user_id),
    attendance_service: AttendanceService = Depends(get_attendance_service)
):
    """Check in (mark today's entry time)."""
    return attendance_service.check_in(user_id)


@router.post("/out", response_model=AttendanceResponse)
async def check_out(
    user_id: int = Depends(get_current_user_id),
    attendance_service: AttendanceService = Depends(get_attendance_service)
):
    """Check out (mark today's exit time and compute worked hours)."""
    return attendance_service.check_out(user_id)


@router.get("/today", response_model=Optional[AttendanceResponse])
async def get_today(
    user_id: int = Depends(get_current_user_id),
    attendance_service: AttendanceService = Depends(get_attendance_service)
):
    """Get today's record, if any."""
    return attendance_service.today(user_id)


@router.get("/history", response_model=List[AttendanceResponse])
async def get_history(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    user_id: int = Depends(get_current_user_id),
    attendance_service: AttendanceService = Depends(get_attendance_service)
):
    """List own attendance records, most recent first."""
    return attendance_service.history(user_id, skip=skip, limit=limit)


@router.get("/stats", response_model=AttendanceStats)
async def get_stats(
    user_id: int = Depends(get_current_user_id),
    attendance_service: AttendanceService = Depends(get_attendance_service)
):
    """Get worked-hours statistics for the current user."""
    return attendance_service.stats(user_id)
