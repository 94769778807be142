"""Domain model entities for aoiro.

These are pure data classes representing bookkeeping concepts, independent of
database schema. Services and reports exchange these objects; the database
layer maps its ORM rows onto them.
"""

from dataclasses import dataclass
from datetime import datetime, date
from enum import Enum
from typing import Optional


class Classification(Enum):
    """Account classification, which decides statement placement and sign."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"

    @property
    def label(self) -> str:
        """Japanese label used on the filed statements."""
        return _CLASSIFICATION_LABELS[self]

    @property
    def is_debit_normal(self) -> bool:
        """True when a debit increases the account balance."""
        match self:
            case Classification.ASSET | Classification.EXPENSE:
                return True
            case Classification.LIABILITY | Classification.EQUITY | Classification.REVENUE:
                return False
        raise ValueError(f"Unknown classification: {self!r}")

    @property
    def is_profit_loss(self) -> bool:
        """True for accounts reported on the profit and loss statement."""
        match self:
            case Classification.REVENUE | Classification.EXPENSE:
                return True
            case Classification.ASSET | Classification.LIABILITY | Classification.EQUITY:
                return False
        raise ValueError(f"Unknown classification: {self!r}")

    @classmethod
    def parse(cls, value: "Classification | str") -> "Classification":
        """Resolve a member from itself, its value, its name or its Japanese label.

        Raises:
            ValueError: If the value names no classification
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.lower() in (member.value, member.name.lower()) or text == member.label:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown classification '{value}'. Expected one of: {choices}")


_CLASSIFICATION_LABELS = {
    Classification.ASSET: "資産",
    Classification.LIABILITY: "負債",
    Classification.EQUITY: "純資産",
    Classification.REVENUE: "収益",
    Classification.EXPENSE: "費用",
}


class DepreciationMethod(Enum):
    """Depreciation method of a fixed asset."""

    STRAIGHT_LINE = "straight_line"

    @property
    def label(self) -> str:
        return "定額法"

    @property
    def prorates_first_year(self) -> bool:
        """Whether the acquisition year is charged by months of use."""
        match self:
            case DepreciationMethod.STRAIGHT_LINE:
                return True
        raise ValueError(f"Unknown depreciation method: {self!r}")

    @classmethod
    def parse(cls, value: "DepreciationMethod | str") -> "DepreciationMethod":
        """Resolve a member from itself, its value or its Japanese label."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text.lower() in (member.value, member.name.lower()) or text == member.label:
                return member
        raise ValueError(f"Unknown depreciation method '{value}'")


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry."""

    id: int
    code: int
    name: str
    classification: Classification
    created_at: datetime


@dataclass(frozen=True)
class JournalEntry:
    """Balanced debit/credit pair."""

    id: int
    date: date
    debit_account_id: int
    debit_amount: int
    credit_account_id: int
    credit_amount: int
    description: str
    created_at: datetime
    debit_account_name: Optional[str] = None
    credit_account_name: Optional[str] = None


@dataclass(frozen=True)
class FixedAsset:
    """Depreciable fixed asset.

    ``accumulated_dep`` is the cumulative depreciation as of the start of the
    reporting year. ``depreciation_rate`` is scaled by 10000 (0.200 -> 2000).
    """

    id: int
    name: str
    acquisition_date: date
    acquisition_cost: int
    useful_life: int
    depreciation_method: DepreciationMethod
    depreciation_rate: int
    accumulated_dep: int
    memo: str
    is_active: bool


@dataclass(frozen=True)
class RentDetail:
    """Rent contract line of the rent breakdown."""

    id: int
    payee_address: str
    payee_name: str
    rent_type: str
    monthly_rent: int
    annual_total: int
    business_ratio: int
    memo: str


@dataclass(frozen=True)
class LossCarryforward:
    """Net operating loss carried into the three following years."""

    id: int
    loss_year: int
    loss_amount: int
    used_year_1: int
    used_year_2: int
    used_year_3: int
    memo: str

    @property
    def total_used(self) -> int:
        return self.used_year_1 + self.used_year_2 + self.used_year_3

    def used_in_slot(self, slot: int) -> int:
        """Amount recorded for the given year after the loss (1, 2 or 3)."""
        match slot:
            case 1:
                return self.used_year_1
            case 2:
                return self.used_year_2
            case 3:
                return self.used_year_3
        raise ValueError(f"Carryforward slot must be 1, 2 or 3, got {slot}")


# Report value objects


@dataclass(frozen=True)
class AccountTotals:
    """Debit and credit totals of one account over a period."""

    debit_total: int = 0
    credit_total: int = 0


@dataclass(frozen=True)
class TrialBalanceRow:
    account_id: int
    account_code: int
    account_name: str
    classification: Classification
    debit_total: int
    credit_total: int
    balance: int


@dataclass(frozen=True)
class TrialBalance:
    year: int
    month: Optional[int]
    rows: tuple[TrialBalanceRow, ...]
    debit_grand_total: int
    credit_grand_total: int

    @property
    def is_balanced(self) -> bool:
        return self.debit_grand_total == self.credit_grand_total


@dataclass(frozen=True)
class ProfitLossRow:
    account_id: int
    account_code: int
    account_name: str
    amount: int


@dataclass(frozen=True)
class ProfitLoss:
    year: int
    revenue_rows: tuple[ProfitLossRow, ...]
    expense_rows: tuple[ProfitLossRow, ...]
    total_revenue: int
    total_expense: int
    net_income: int

    def expense_amount(self, account_code: int) -> int:
        """Amount of one expense account, 0 when it had no activity."""
        for row in self.expense_rows:
            if row.account_code == account_code:
                return row.amount
        return 0


@dataclass(frozen=True)
class BalanceSheetRow:
    account_id: int
    account_code: int
    account_name: str
    amount: int


@dataclass(frozen=True)
class BalanceSheet:
    """Cumulative position at year end.

    ``net_income`` is the current year's result shown as pending equity.
    """

    year: int
    asset_rows: tuple[BalanceSheetRow, ...]
    liability_rows: tuple[BalanceSheetRow, ...]
    equity_rows: tuple[BalanceSheetRow, ...]
    total_assets: int
    total_liabilities: int
    total_equity: int
    net_income: int

    @property
    def imbalance(self) -> int:
        """Assets minus liabilities, equity and net income; 0 for correct books."""
        return self.total_assets - (self.total_liabilities + self.total_equity + self.net_income)

    @property
    def is_balanced(self) -> bool:
        return self.imbalance == 0


@dataclass(frozen=True)
class DepreciationRow:
    asset_id: int
    asset_name: str
    acquisition_date: date
    acquisition_cost: int
    depreciation_method: DepreciationMethod
    useful_life: int
    depreciation_rate: int
    months_used: int
    accumulated_dep_prev: int
    current_year_dep: int
    accumulated_dep_end: int
    book_value_end: int


@dataclass(frozen=True)
class DepreciationSchedule:
    year: int
    rows: tuple[DepreciationRow, ...]

    @property
    def total(self) -> int:
        return sum(row.current_year_dep for row in self.rows)


@dataclass(frozen=True)
class RentAllocationRow:
    rent_detail: RentDetail
    deductible: int


@dataclass(frozen=True)
class RentAllocation:
    rows: tuple[RentAllocationRow, ...]

    @property
    def total(self) -> int:
        return sum(row.deductible for row in self.rows)


@dataclass(frozen=True)
class MonthlySalesPurchase:
    month: int
    sales: int
    purchases: int


@dataclass(frozen=True)
class LossCarryforwardApplied:
    loss_id: int
    loss_year: int
    slot: int
    original_loss: int
    already_used: int
    applied_this_year: int
    remaining: int


@dataclass(frozen=True)
class LossCarryforwardSummary:
    year: int
    rows: tuple[LossCarryforwardApplied, ...]
    total_applied: int
    income_before: int
    income_after: int


@dataclass(frozen=True)
class FinalStatement:
    """Four-page blue-form annual statement."""

    year: int
    profit_loss: ProfitLoss
    gross_profit: int
    purchases_amount: int
    monthly: tuple[MonthlySalesPurchase, ...]
    annual_sales_total: int
    annual_purchases_total: int
    depreciation: DepreciationSchedule
    rent: RentAllocation
    balance_sheet: BalanceSheet
    loss_carryforward: LossCarryforwardSummary

    @property
    def depreciation_total(self) -> int:
        return self.depreciation.total

    @property
    def rent_total(self) -> int:
        return self.rent.total
