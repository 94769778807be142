"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Iterator, Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from aoiro.domain.entities import (
    Account,
    Classification,
    DepreciationMethod,
    FixedAsset,
    JournalEntry,
    LossCarryforward,
    RentDetail,
)


class Database(ABC):
    """Abstract database interface for aoiro.

    Every mutating method is a single transaction. Report code wraps its reads
    in ``snapshot()`` so one statement never mixes pre- and post-mutation data.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def snapshot(self) -> AbstractContextManager[None]:
        """Context manager holding one consistent read view of the ledger."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, code: int, name: str, classification: Classification) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_code(self, code: int) -> Optional[Account]:
        """Get account by code."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by code."""
        pass

    # Journal entry operations
    @abstractmethod
    def create_entry(
        self,
        date: date,
        debit_account_id: int,
        debit_amount: int,
        credit_account_id: int,
        credit_amount: int,
        description: str = "",
    ) -> int:
        """Create a journal entry. Returns entry ID."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: int) -> Optional[JournalEntry]:
        """Get journal entry by ID."""
        pass

    @abstractmethod
    def update_entry(
        self,
        entry_id: int,
        date: date,
        debit_account_id: int,
        debit_amount: int,
        credit_account_id: int,
        credit_amount: int,
        description: str = "",
    ) -> None:
        """Replace all fields of a journal entry."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: int) -> None:
        """Delete a journal entry."""
        pass

    @abstractmethod
    def iter_entries(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Iterator[JournalEntry]:
        """Iterate entries within an inclusive date range.

        Args:
            start_date: Optional first date; None means the earliest entry
            end_date: Optional last date; None means the latest entry

        Entries are ordered by date, then by ID (insertion order).
        """
        pass

    # Fixed asset operations
    @abstractmethod
    def create_fixed_asset(
        self,
        name: str,
        acquisition_date: date,
        acquisition_cost: int,
        useful_life: int,
        depreciation_method: DepreciationMethod,
        depreciation_rate: int,
        accumulated_dep: int = 0,
        memo: str = "",
        is_active: bool = True,
    ) -> int:
        """Create a fixed asset. Returns asset ID."""
        pass

    @abstractmethod
    def get_fixed_asset(self, asset_id: int) -> Optional[FixedAsset]:
        """Get fixed asset by ID."""
        pass

    @abstractmethod
    def list_fixed_assets(self) -> list[FixedAsset]:
        """List fixed assets ordered by acquisition date."""
        pass

    @abstractmethod
    def delete_fixed_asset(self, asset_id: int) -> None:
        """Delete a fixed asset."""
        pass

    # Rent detail operations
    @abstractmethod
    def create_rent_detail(
        self,
        payee_address: str,
        payee_name: str,
        rent_type: str,
        monthly_rent: int,
        annual_total: int,
        business_ratio: int,
        memo: str = "",
    ) -> int:
        """Create a rent detail. Returns rent detail ID."""
        pass

    @abstractmethod
    def get_rent_detail(self, rent_id: int) -> Optional[RentDetail]:
        """Get rent detail by ID."""
        pass

    @abstractmethod
    def list_rent_details(self) -> list[RentDetail]:
        """List rent details ordered by ID."""
        pass

    @abstractmethod
    def delete_rent_detail(self, rent_id: int) -> None:
        """Delete a rent detail."""
        pass

    # Loss carryforward operations
    @abstractmethod
    def create_loss_carryforward(self, loss_year: int, loss_amount: int, memo: str = "") -> int:
        """Create a loss carryforward record. Returns record ID."""
        pass

    @abstractmethod
    def get_loss_carryforward(self, loss_id: int) -> Optional[LossCarryforward]:
        """Get loss carryforward record by ID."""
        pass

    @abstractmethod
    def list_loss_carryforwards(self) -> list[LossCarryforward]:
        """List loss carryforward records ordered by loss year, then ID."""
        pass

    @abstractmethod
    def update_loss_carryforward_usage(self, usages: dict[int, tuple[int, int, int]]) -> None:
        """Overwrite used_year_1..3 of several records in one transaction.

        Args:
            usages: Mapping of record ID to (used_year_1, used_year_2, used_year_3)
        """
        pass

    @abstractmethod
    def delete_loss_carryforward(self, loss_id: int) -> None:
        """Delete a loss carryforward record."""
        pass
