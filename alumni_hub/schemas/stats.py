"""
Statistics Pydantic Schemas
"""

from alumni_hub.schemas.base import CamelModel


class StatsResponse(CamelModel):
    """Network-wide counters for the admin dashboard"""

    total_raised: float
    total_donors: int
    active_campaigns: int
    completed_campaigns: int
    success_rate: int
    total_users: int
    total_events: int
