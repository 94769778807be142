"""Fixed asset register and depreciation schedule."""

import logging
from datetime import date, datetime
from typing import Optional

from aoiro.database.base import Database
from aoiro.domain import errors
from aoiro.domain.entities import (
    DepreciationMethod,
    DepreciationRow,
    DepreciationSchedule,
    FixedAsset,
)
from aoiro.utils.amount_parser import is_whole_number
from aoiro.utils.date_parser import parse_date

logger = logging.getLogger(__name__)

RATE_SCALE = 10000


def compute_depreciation(asset: FixedAsset, year: int) -> Optional[DepreciationRow]:
    """Depreciation of one asset for a year.

    The annual charge is ``cost * rate / 10000`` rounded down. In the
    acquisition year a pro-rating method charges ``13 - month`` twelfths of
    it. The charge is capped so the book value never drops below 1 yen.

    Args:
        asset: Fixed asset, with accumulated depreciation as of the start of year
        year: Reporting year

    Returns:
        Schedule row, or None if the asset was acquired after the year
    """
    acquired = asset.acquisition_date
    if acquired.year > year:
        return None

    annual = asset.acquisition_cost * asset.depreciation_rate // RATE_SCALE

    if acquired.year == year and asset.depreciation_method.prorates_first_year:
        months_used = 13 - acquired.month
        current = annual * months_used // 12
    else:
        months_used = 12
        current = annual

    # Book value stays at 1 yen (備忘価額)
    current = max(0, min(current, asset.acquisition_cost - asset.accumulated_dep - 1))

    accumulated_end = asset.accumulated_dep + current
    return DepreciationRow(
        asset_id=asset.id,
        asset_name=asset.name,
        acquisition_date=acquired,
        acquisition_cost=asset.acquisition_cost,
        depreciation_method=asset.depreciation_method,
        useful_life=asset.useful_life,
        depreciation_rate=asset.depreciation_rate,
        months_used=months_used,
        accumulated_dep_prev=asset.accumulated_dep,
        current_year_dep=current,
        accumulated_dep_end=accumulated_end,
        book_value_end=asset.acquisition_cost - accumulated_end,
    )


class DepreciationService:
    """Service for the fixed asset register (減価償却資産)."""

    def __init__(self, db: Database):
        """Initialize depreciation service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_fixed_asset(
        self,
        name: str,
        acquisition_date: date | str | None,
        acquisition_cost: int,
        useful_life: int,
        depreciation_rate: int,
        depreciation_method: DepreciationMethod | str = DepreciationMethod.STRAIGHT_LINE,
        accumulated_dep: int = 0,
        memo: str = "",
        is_active: bool = True,
    ) -> int:
        """Register a fixed asset.

        Args:
            name: Asset name
            acquisition_date: Date the asset went into service
            acquisition_cost: Cost in yen
            useful_life: Useful life in years
            depreciation_rate: Rate scaled by 10000 (0.200 -> 2000)
            depreciation_method: Method, straight line by default
            accumulated_dep: Depreciation accumulated before the current year
            memo: Free text
            is_active: Inactive assets are left out of the schedule

        Returns:
            Asset ID

        Raises:
            InvalidAssetError: If any attribute is out of range
        """
        if name is None or not name.strip():
            raise errors.InvalidAssetError("Asset name must not be blank")

        if isinstance(acquisition_date, datetime):
            acquisition_date = acquisition_date.date()
        elif acquisition_date is None or isinstance(acquisition_date, str):
            if not acquisition_date:
                raise errors.InvalidAssetError("Acquisition date is required")
            try:
                acquisition_date = parse_date(acquisition_date)
            except ValueError as e:
                raise errors.InvalidAssetError(str(e))

        for field, value in (
            ("Acquisition cost", acquisition_cost),
            ("Useful life", useful_life),
            ("Depreciation rate", depreciation_rate),
            ("Accumulated depreciation", accumulated_dep),
        ):
            if not is_whole_number(value):
                raise errors.InvalidAssetError(f"{field} must be an integer, got {value!r}")

        if acquisition_cost <= 0:
            raise errors.InvalidAssetError(f"Acquisition cost must be positive, got {acquisition_cost}")
        if useful_life <= 0:
            raise errors.InvalidAssetError(f"Useful life must be positive, got {useful_life}")
        if not 0 <= depreciation_rate <= RATE_SCALE:
            raise errors.InvalidAssetError(
                f"Depreciation rate must be between 0 and {RATE_SCALE}, got {depreciation_rate}"
            )
        if not 0 <= accumulated_dep < acquisition_cost:
            raise errors.InvalidAssetError(
                f"Accumulated depreciation must be at least 0 and below the cost, got {accumulated_dep}"
            )

        try:
            method = DepreciationMethod.parse(depreciation_method)
        except ValueError as e:
            raise errors.InvalidAssetError(str(e))

        return self.db.create_fixed_asset(
            name=name.strip(),
            acquisition_date=acquisition_date,
            acquisition_cost=acquisition_cost,
            useful_life=useful_life,
            depreciation_method=method,
            depreciation_rate=depreciation_rate,
            accumulated_dep=accumulated_dep,
            memo=memo or "",
            is_active=is_active,
        )

    def delete_fixed_asset(self, asset_id: int) -> None:
        """Delete a fixed asset.

        Raises:
            AssetNotFoundError: If the asset doesn't exist
        """
        if self.db.get_fixed_asset(asset_id) is None:
            raise errors.AssetNotFoundError(errors.asset_not_found(asset_id))
        self.db.delete_fixed_asset(asset_id)

    def list_fixed_assets(self) -> list[FixedAsset]:
        """List fixed assets ordered by acquisition date."""
        return self.db.list_fixed_assets()

    def schedule(self, year: int) -> DepreciationSchedule:
        """Depreciation schedule (減価償却費の計算) of active assets for a year."""
        rows = []
        for asset in self.db.list_fixed_assets():
            if not asset.is_active:
                logger.debug("Skipping inactive asset %s", asset.id)
                continue
            row = compute_depreciation(asset, year)
            if row is not None:
                rows.append(row)
        return DepreciationSchedule(year=year, rows=tuple(rows))
