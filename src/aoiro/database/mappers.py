"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the domain entities stay stable
when the database schema changes.
"""

from aoiro.domain import entities as domain
from aoiro.database.models import (
    Account as ORMAccount,
    JournalEntry as ORMJournalEntry,
    FixedAsset as ORMFixedAsset,
    RentDetail as ORMRentDetail,
    LossCarryforward as ORMLossCarryforward,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        code=orm_account.code,
        name=orm_account.name,
        classification=orm_account.classification,
        created_at=orm_account.created_at,
    )


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    return domain.JournalEntry(
        id=orm_entry.id,
        date=orm_entry.date,
        debit_account_id=orm_entry.debit_account_id,
        debit_amount=orm_entry.debit_amount,
        credit_account_id=orm_entry.credit_account_id,
        credit_amount=orm_entry.credit_amount,
        description=orm_entry.description or "",
        created_at=orm_entry.created_at,
        debit_account_name=orm_entry.debit_account.name if orm_entry.debit_account else None,
        credit_account_name=orm_entry.credit_account.name if orm_entry.credit_account else None,
    )


def fixed_asset_to_domain(orm_asset: ORMFixedAsset) -> domain.FixedAsset:
    """Convert SQLAlchemy FixedAsset model to domain FixedAsset entity."""
    return domain.FixedAsset(
        id=orm_asset.id,
        name=orm_asset.name,
        acquisition_date=orm_asset.acquisition_date,
        acquisition_cost=orm_asset.acquisition_cost,
        useful_life=orm_asset.useful_life,
        depreciation_method=orm_asset.depreciation_method,
        depreciation_rate=orm_asset.depreciation_rate,
        accumulated_dep=orm_asset.accumulated_dep,
        memo=orm_asset.memo or "",
        is_active=bool(orm_asset.is_active),
    )


def rent_detail_to_domain(orm_rent: ORMRentDetail) -> domain.RentDetail:
    """Convert SQLAlchemy RentDetail model to domain RentDetail entity."""
    return domain.RentDetail(
        id=orm_rent.id,
        payee_address=orm_rent.payee_address or "",
        payee_name=orm_rent.payee_name,
        rent_type=orm_rent.rent_type or "",
        monthly_rent=orm_rent.monthly_rent,
        annual_total=orm_rent.annual_total,
        business_ratio=orm_rent.business_ratio,
        memo=orm_rent.memo or "",
    )


def loss_carryforward_to_domain(orm_loss: ORMLossCarryforward) -> domain.LossCarryforward:
    """Convert SQLAlchemy LossCarryforward model to domain LossCarryforward entity."""
    return domain.LossCarryforward(
        id=orm_loss.id,
        loss_year=orm_loss.loss_year,
        loss_amount=orm_loss.loss_amount,
        used_year_1=orm_loss.used_year_1,
        used_year_2=orm_loss.used_year_2,
        used_year_3=orm_loss.used_year_3,
        memo=orm_loss.memo or "",
    )
