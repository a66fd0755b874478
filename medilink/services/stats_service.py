from sqlmodel import Session

from medilink.repositories.stats_repo import StatsRepository
from medilink.schemas.stats import AdminDashboardStats


class StatsService:
    """
    Orchestrates aggregated admin dashboard statistics.
    """

    def __init__(self, repo: StatsRepository):
        self.repo = repo

    def get_admin_dashboard_stats(self, session: Session) -> AdminDashboardStats:
        return AdminDashboardStats(
            users=self.repo.count_users(session),
            medicines=self.repo.count_medicines(session),
            diagnoses=self.repo.count_diagnoses(session),
            allergies=self.repo.count_allergies(session),
            orders=self.repo.count_orders(session),
        )
