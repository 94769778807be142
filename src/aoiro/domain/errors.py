"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


# Chart of accounts
class InvalidCodeError(ValidationError):
    """Account code is not a positive integer."""


class InvalidNameError(ValidationError):
    """Account name is blank."""


class DuplicateCodeError(ConflictError):
    """Account code is already in use."""


class MissingAccountError(NotFoundError):
    """Referenced account does not exist."""


# Journal
class InvalidDateError(ValidationError):
    """Entry date is missing or cannot be parsed."""


class SameAccountError(ValidationError):
    """Debit and credit side reference the same account."""


class UnbalancedAmountError(ValidationError):
    """Debit amount differs from credit amount."""


class InvalidAmountError(ValidationError):
    """Entry amount is not a whole number of yen."""


class NonPositiveAmountError(ValidationError):
    """Entry amount is zero or negative."""


class EntryNotFoundError(NotFoundError):
    """Journal entry does not exist."""


# Registers
class InvalidAssetError(ValidationError):
    """Fixed asset attributes are out of range."""


class AssetNotFoundError(NotFoundError):
    """Fixed asset does not exist."""


class InvalidRentDetailError(ValidationError):
    """Rent detail attributes are out of range."""


class RentDetailNotFoundError(NotFoundError):
    """Rent detail does not exist."""


class InvalidLossCarryforwardError(ValidationError):
    """Loss carryforward attributes are out of range."""


class LossCarryforwardNotFoundError(NotFoundError):
    """Loss carryforward record does not exist."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_code_not_found(code: int) -> str:
    """Return message for missing account by code."""
    return f"Account with code {code} not found"


def duplicate_account_code(code: int) -> str:
    """Return message for duplicate account code."""
    return f"Account with code {code} already exists"


def entry_not_found(entry_id: int) -> str:
    """Return message for missing journal entry."""
    return f"Journal entry {entry_id} not found"


def unbalanced_amount(debit_amount: int, credit_amount: int) -> str:
    """Return message when debit and credit amounts differ."""
    return f"Debit amount {debit_amount} does not match credit amount {credit_amount}"


def asset_not_found(asset_id: int) -> str:
    """Return message for missing fixed asset."""
    return f"Fixed asset {asset_id} not found"


def rent_detail_not_found(rent_id: int) -> str:
    """Return message for missing rent detail."""
    return f"Rent detail {rent_id} not found"


def loss_carryforward_not_found(loss_id: int) -> str:
    """Return message for missing loss carryforward record."""
    return f"Loss carryforward {loss_id} not found"
