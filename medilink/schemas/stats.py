from pydantic import ConfigDict
from sqlmodel import SQLModel


class AdminDashboardStats(SQLModel):
    """
    Row counts shown on the admin dashboard.
    """
    model_config = ConfigDict(extra="forbid")

    users: int
    medicines: int
    diagnoses: int
    allergies: int
    orders: int
