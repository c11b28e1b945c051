"""Report response schemas."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ReportSummaryRead(BaseModel):
    """Verified transaction totals for a date range and optional class."""

    model_config = ConfigDict(from_attributes=True)

    total_transactions: int = Field(..., ge=0)
    total_deposits: Decimal
    total_withdrawals: Decimal
    active_student_count: int = Field(..., ge=0)
    average_net_savings: Decimal

    @field_serializer("total_deposits", "total_withdrawals", "average_net_savings")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)


class MonthlyReportRead(BaseModel):
    """Verified transaction totals for one calendar month."""

    model_config = ConfigDict(from_attributes=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    month_name: str
    total_transactions: int = Field(..., ge=0)
    total_deposits: Decimal
    total_withdrawals: Decimal

    @field_serializer("total_deposits", "total_withdrawals")
    def _serialize_amount(self, value: Decimal) -> float:
        return float(value)
