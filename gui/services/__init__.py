from . import clients, stats_service  # noqa: F401

from .clients import get_lift_client
from .stats_service import DashboardStats, compute_stats
