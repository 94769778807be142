"""Rent breakdown register (地代家賃の内訳)."""

from typing import Optional

from aoiro.database.base import Database
from aoiro.domain import errors
from aoiro.domain.entities import RentAllocation, RentAllocationRow, RentDetail
from aoiro.utils.amount_parser import is_whole_number


def deductible(rent: RentDetail) -> int:
    """Business share of the annual rent, rounded down to whole yen."""
    return rent.annual_total * rent.business_ratio // 100


class RentService:
    """Service for rent contract lines and their deductible amounts."""

    def __init__(self, db: Database):
        """Initialize rent service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_rent_detail(
        self,
        payee_name: str,
        monthly_rent: int,
        business_ratio: int,
        payee_address: str = "",
        rent_type: str = "",
        annual_total: Optional[int] = None,
        memo: str = "",
    ) -> int:
        """Register a rent contract line.

        Args:
            payee_name: Landlord name
            monthly_rent: Monthly rent in yen
            business_ratio: Business use percentage, 1..100
            payee_address: Landlord address
            rent_type: What is rented (e.g. 事務所)
            annual_total: Rent paid in the year; defaults to 12 months of rent
            memo: Free text

        Returns:
            Rent detail ID

        Raises:
            InvalidRentDetailError: If any attribute is out of range
        """
        if payee_name is None or not payee_name.strip():
            raise errors.InvalidRentDetailError("Payee name must not be blank")
        for field, value in (("Monthly rent", monthly_rent), ("Business ratio", business_ratio)):
            if not is_whole_number(value):
                raise errors.InvalidRentDetailError(f"{field} must be an integer, got {value!r}")
        if monthly_rent < 0:
            raise errors.InvalidRentDetailError(f"Monthly rent must not be negative, got {monthly_rent}")
        if annual_total is None:
            annual_total = monthly_rent * 12
        elif not is_whole_number(annual_total):
            raise errors.InvalidRentDetailError(f"Annual total must be an integer, got {annual_total!r}")
        if annual_total < 0:
            raise errors.InvalidRentDetailError(f"Annual total must not be negative, got {annual_total}")
        if not 1 <= business_ratio <= 100:
            raise errors.InvalidRentDetailError(f"Business ratio must be between 1 and 100, got {business_ratio}")

        return self.db.create_rent_detail(
            payee_address=payee_address or "",
            payee_name=payee_name.strip(),
            rent_type=rent_type or "",
            monthly_rent=monthly_rent,
            annual_total=annual_total,
            business_ratio=business_ratio,
            memo=memo or "",
        )

    def delete_rent_detail(self, rent_id: int) -> None:
        """Delete a rent detail.

        Raises:
            RentDetailNotFoundError: If the rent detail doesn't exist
        """
        if self.db.get_rent_detail(rent_id) is None:
            raise errors.RentDetailNotFoundError(errors.rent_detail_not_found(rent_id))
        self.db.delete_rent_detail(rent_id)

    def list_rent_details(self) -> list[RentDetail]:
        return self.db.list_rent_details()

    def allocate(self) -> RentAllocation:
        """Every rent line with its deductible amount."""
        return RentAllocation(
            rows=tuple(RentAllocationRow(rent_detail=rent, deductible=deductible(rent)) for rent in self.db.list_rent_details())
        )
