"""Net operating loss carryforward (純損失の繰越控除)."""

import logging
from typing import Iterable

from aoiro.database.base import Database
from aoiro.domain import errors
from aoiro.domain.entities import LossCarryforward, LossCarryforwardApplied, LossCarryforwardSummary
from aoiro.domain.reports import ReportService
from aoiro.utils.amount_parser import is_whole_number

logger = logging.getLogger(__name__)

CARRYFORWARD_YEARS = 3


def allocate_losses(year: int, income: int, records: Iterable[LossCarryforward]) -> LossCarryforwardSummary:
    """Apply carried losses against the income of a year.

    Losses from the three previous years are used oldest first until the
    income is exhausted. The amount already used by a record excludes its
    slot for this year, so repeating the calculation after the result has
    been stored gives the same answer.

    Args:
        year: Year whose income absorbs the losses
        income: Net income of the year before the deduction
        records: Loss carryforward records

    Returns:
        Summary with one row per eligible record
    """
    if income <= 0:
        return LossCarryforwardSummary(year=year, rows=(), total_applied=0, income_before=income, income_after=income)

    eligible = sorted(
        (r for r in records if 1 <= year - r.loss_year <= CARRYFORWARD_YEARS),
        key=lambda r: (r.loss_year, r.id),
    )

    available = income
    rows = []
    for record in eligible:
        slot = year - record.loss_year
        already_used = record.total_used - record.used_in_slot(slot)
        remaining = record.loss_amount - already_used
        applied = min(remaining, available) if remaining > 0 and available > 0 else 0
        available -= applied
        rows.append(
            LossCarryforwardApplied(
                loss_id=record.id,
                loss_year=record.loss_year,
                slot=slot,
                original_loss=record.loss_amount,
                already_used=already_used,
                applied_this_year=applied,
                remaining=remaining - applied,
            )
        )

    total_applied = sum(row.applied_this_year for row in rows)
    return LossCarryforwardSummary(
        year=year,
        rows=tuple(rows),
        total_applied=total_applied,
        income_before=income,
        income_after=income - total_applied,
    )


class LossCarryforwardService:
    """Service for loss carryforward records and their yearly use."""

    def __init__(self, db: Database):
        """Initialize loss carryforward service.

        Args:
            db: Database instance
        """
        self.db = db
        self.reports = ReportService(db)

    def add_loss_carryforward(self, loss_year: int, loss_amount: int, memo: str = "") -> int:
        """Record the net loss of a year.

        Raises:
            InvalidLossCarryforwardError: If loss_year is not an integer or
                loss_amount is not a positive integer
        """
        if not is_whole_number(loss_year):
            raise errors.InvalidLossCarryforwardError(f"Loss year must be an integer, got {loss_year!r}")
        if not is_whole_number(loss_amount):
            raise errors.InvalidLossCarryforwardError(f"Loss amount must be an integer, got {loss_amount!r}")
        if loss_amount <= 0:
            raise errors.InvalidLossCarryforwardError(f"Loss amount must be positive, got {loss_amount}")
        return self.db.create_loss_carryforward(loss_year=loss_year, loss_amount=loss_amount, memo=memo or "")

    def delete_loss_carryforward(self, loss_id: int) -> None:
        """Delete a loss carryforward record.

        Raises:
            LossCarryforwardNotFoundError: If the record doesn't exist
        """
        if self.db.get_loss_carryforward(loss_id) is None:
            raise errors.LossCarryforwardNotFoundError(errors.loss_carryforward_not_found(loss_id))
        self.db.delete_loss_carryforward(loss_id)

    def list_loss_carryforwards(self) -> list[LossCarryforward]:
        """List records ordered by loss year."""
        return self.db.list_loss_carryforwards()

    def summarize(self, year: int) -> LossCarryforwardSummary:
        """Compute the deduction for a year without storing it."""
        with self.db.snapshot():
            income = self.reports.profit_loss(year).net_income
            records = self.db.list_loss_carryforwards()
        return allocate_losses(year, income, records)

    def commit(self, year: int) -> LossCarryforwardSummary:
        """Store each record's deduction for the year in its slot.

        The slot for the year is overwritten, so committing again yields the
        same records.

        Returns:
            The summary that was stored
        """
        with self.db.snapshot():
            summary = self.summarize(year)
            records = {record.id: record for record in self.db.list_loss_carryforwards()}

            usages = {}
            for row in summary.rows:
                record = records[row.loss_id]
                slots = [record.used_year_1, record.used_year_2, record.used_year_3]
                slots[row.slot - 1] = row.applied_this_year
                usages[row.loss_id] = (slots[0], slots[1], slots[2])

            if usages:
                self.db.update_loss_carryforward_usage(usages)

        logger.info("Committed loss carryforward for %s: %s applied", year, summary.total_applied)
        return summary

    def set_usage(self, loss_id: int, used_year_1: int, used_year_2: int, used_year_3: int) -> None:
        """Overwrite the recorded usage of one record.

        Raises:
            LossCarryforwardNotFoundError: If the record doesn't exist
            InvalidLossCarryforwardError: If a value is not a non-negative
                integer or the total exceeds the loss amount
        """
        record = self.db.get_loss_carryforward(loss_id)
        if record is None:
            raise errors.LossCarryforwardNotFoundError(errors.loss_carryforward_not_found(loss_id))

        usage = (used_year_1, used_year_2, used_year_3)
        if not all(is_whole_number(value) for value in usage):
            raise errors.InvalidLossCarryforwardError(f"Used amounts must be integers, got {usage!r}")
        if any(value < 0 for value in usage):
            raise errors.InvalidLossCarryforwardError("Used amounts must not be negative")
        if sum(usage) > record.loss_amount:
            raise errors.InvalidLossCarryforwardError(
                f"Used amounts total {sum(usage)} exceeds the loss of {record.loss_amount}"
            )

        self.db.update_loss_carryforward_usage({loss_id: usage})
