from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.core.auth import require_admin
from medilink.database import get_session
from medilink.repositories.stats_repo import StatsRepository
from medilink.schemas.stats import AdminDashboardStats
from medilink.services.stats_service import StatsService

router = APIRouter(prefix="/admin/stats", tags=["Admin Stats"])

repo = StatsRepository()
service = StatsService(repo)


@router.get(
    "",
    response_model=AdminDashboardStats,
    dependencies=[Depends(require_admin)],
)
def get_admin_dashboard_stats(session: Session = Depends(get_session)):
    """
    Row counts for the admin dashboard.

    Only accessible to users with is_admin set.
    """
    return service.get_admin_dashboard_stats(session)
