"""Public schema exports."""

from .leaderboard import LeaderboardClass, LeaderboardStudent, RankRead
from .report import MonthlyReportRead, ReportSummaryRead
from .student import BadgeEvaluationRead, BadgeRead, BalanceRead, SavingsSummaryRead
from .transaction import TransactionCreate, TransactionRead, TransactionVerification, TransactionVerify

__all__ = [
	"BadgeEvaluationRead",
	"BadgeRead",
	"BalanceRead",
	"LeaderboardClass",
	"LeaderboardStudent",
	"MonthlyReportRead",
	"RankRead",
	"ReportSummaryRead",
	"SavingsSummaryRead",
	"TransactionCreate",
	"TransactionRead",
	"TransactionVerification",
	"TransactionVerify",
]
