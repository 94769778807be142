"""Tests for the net loss carryforward."""

import pytest

from aoiro.domain import errors
from aoiro.domain.entities import LossCarryforward
from aoiro.domain.loss_carryforward import allocate_losses


def _loss(id, loss_year, loss_amount, used=(0, 0, 0)):
    return LossCarryforward(
        id=id,
        loss_year=loss_year,
        loss_amount=loss_amount,
        used_year_1=used[0],
        used_year_2=used[1],
        used_year_3=used[2],
        memo="",
    )


class TestAllocateLosses:
    def test_two_years_back(self):
        summary = allocate_losses(2024, 200000, [_loss(1, 2022, 300000)])

        (row,) = summary.rows
        assert row.slot == 2
        assert row.applied_this_year == 200000
        assert row.remaining == 100000
        assert summary.total_applied == 200000
        assert summary.income_before == 200000
        assert summary.income_after == 0

    @pytest.mark.parametrize("income", [0, -50000])
    def test_no_income(self, income):
        summary = allocate_losses(2024, income, [_loss(1, 2022, 300000)])

        assert summary.rows == ()
        assert summary.total_applied == 0
        assert summary.income_after == income

    def test_oldest_first(self):
        records = [_loss(2, 2023, 100000), _loss(1, 2021, 100000, used=(50000, 0, 0))]

        summary = allocate_losses(2024, 120000, records)

        assert [(r.loss_year, r.applied_this_year) for r in summary.rows] == [(2021, 50000), (2023, 70000)]
        assert summary.income_after == 0

    def test_ties_ordered_by_id(self):
        records = [_loss(5, 2023, 100000), _loss(3, 2023, 100000)]

        summary = allocate_losses(2024, 150000, records)

        assert [(r.loss_id, r.applied_this_year) for r in summary.rows] == [(3, 100000), (5, 50000)]

    def test_expired_and_future_records_ignored(self):
        records = [_loss(1, 2020, 100000), _loss(2, 2024, 100000), _loss(3, 2025, 100000)]

        summary = allocate_losses(2024, 500000, records)

        assert summary.rows == ()
        assert summary.income_after == 500000

    def test_never_exceeds_remaining(self):
        records = [_loss(1, 2021, 100000, used=(60000, 40000, 0)), _loss(2, 2022, 80000, used=(30000, 0, 0))]

        summary = allocate_losses(2024, 1_000_000, records)

        assert [r.applied_this_year for r in summary.rows] == [0, 50000]
        assert all(r.remaining >= 0 for r in summary.rows)
        assert summary.income_after == 950000

    def test_own_slot_not_counted_as_used(self):
        # Same record after the 2024 result was stored in slot 2
        stored = _loss(1, 2022, 300000, used=(0, 200000, 0))

        summary = allocate_losses(2024, 200000, [stored])

        assert summary.rows[0].already_used == 0
        assert summary.rows[0].applied_this_year == 200000


class TestLossCarryforwardService:
    def test_scenario(self, loss_service, add_entry):
        add_entry("2024-05-10", 1112, 4100, 200000)
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        summary = loss_service.summarize(2024)

        assert summary.income_before == 200000
        assert summary.total_applied == 200000
        assert summary.income_after == 0
        # summarize never writes
        assert loss_service.db.get_loss_carryforward(loss_id).used_year_2 == 0

    def test_commit_records_slot(self, loss_service, add_entry):
        add_entry("2024-05-10", 1112, 4100, 200000)
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        loss_service.commit(2024)

        record = loss_service.db.get_loss_carryforward(loss_id)
        assert (record.used_year_1, record.used_year_2, record.used_year_3) == (0, 200000, 0)

    def test_commit_is_idempotent(self, loss_service, add_entry):
        add_entry("2024-05-10", 1112, 4100, 200000)
        loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        first = loss_service.commit(2024)
        records_after_first = loss_service.list_loss_carryforwards()
        second = loss_service.commit(2024)

        assert first == second
        assert loss_service.list_loss_carryforwards() == records_after_first
        assert loss_service.summarize(2024) == first

    def test_commit_then_next_year(self, loss_service, add_entry):
        add_entry("2023-05-10", 1112, 4100, 200000)
        add_entry("2024-05-10", 1112, 4100, 250000)
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        loss_service.commit(2023)
        summary = loss_service.commit(2024)

        assert summary.rows[0].already_used == 200000
        assert summary.total_applied == 100000
        record = loss_service.db.get_loss_carryforward(loss_id)
        assert (record.used_year_1, record.used_year_2) == (200000, 100000)

    def test_commit_without_income_writes_nothing(self, loss_service, add_entry):
        add_entry("2024-05-10", 5300, 1112, 80000)
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        summary = loss_service.commit(2024)

        assert summary.total_applied == 0
        assert loss_service.db.get_loss_carryforward(loss_id).total_used == 0

    @pytest.mark.parametrize("amount", [0, -1, 1000.5, "1000", True])
    def test_add_rejects_invalid_amount(self, loss_service, amount):
        with pytest.raises(errors.InvalidLossCarryforwardError):
            loss_service.add_loss_carryforward(loss_year=2022, loss_amount=amount)
        assert loss_service.list_loss_carryforwards() == []

    @pytest.mark.parametrize("loss_year", [2022.0, "2022"])
    def test_add_rejects_non_integer_year(self, loss_service, loss_year):
        with pytest.raises(errors.InvalidLossCarryforwardError, match="Loss year"):
            loss_service.add_loss_carryforward(loss_year=loss_year, loss_amount=1000)

    def test_list_ordered_by_loss_year(self, loss_service):
        loss_service.add_loss_carryforward(loss_year=2023, loss_amount=100)
        loss_service.add_loss_carryforward(loss_year=2021, loss_amount=100)

        assert [r.loss_year for r in loss_service.list_loss_carryforwards()] == [2021, 2023]

    def test_delete(self, loss_service):
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        loss_service.delete_loss_carryforward(loss_id)

        assert loss_service.list_loss_carryforwards() == []
        with pytest.raises(errors.LossCarryforwardNotFoundError):
            loss_service.delete_loss_carryforward(loss_id)

    def test_set_usage(self, loss_service):
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        loss_service.set_usage(loss_id, 100000, 50000, 0)

        record = loss_service.db.get_loss_carryforward(loss_id)
        assert (record.used_year_1, record.used_year_2, record.used_year_3) == (100000, 50000, 0)

    @pytest.mark.parametrize(
        "usage", [(-1, 0, 0), (200000, 100000, 1), (0.5, 0, 0), ("100", 0, 0), (0, False, 0)]
    )
    def test_set_usage_rejects_invalid(self, loss_service, usage):
        loss_id = loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)

        with pytest.raises(errors.InvalidLossCarryforwardError):
            loss_service.set_usage(loss_id, *usage)

    def test_set_usage_missing(self, loss_service):
        with pytest.raises(errors.LossCarryforwardNotFoundError):
            loss_service.set_usage(99, 0, 0, 0)
