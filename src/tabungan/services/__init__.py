"""Service layer exports."""

from . import (
	badge_service,
	badge_sweep_service,
	balance_service,
	leaderboard_service,
	ranking,
	report_service,
	transaction_service,
)

__all__ = [
	"badge_service",
	"badge_sweep_service",
	"balance_service",
	"leaderboard_service",
	"ranking",
	"report_service",
	"transaction_service",
]
