"""Chart of accounts domain service."""

from typing import Optional

from aoiro.database.base import Database
from aoiro.domain import errors
from aoiro.domain.entities import Account as AccountEntity, Classification


class AccountService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(self, code: int, name: str, classification: Classification | str) -> int:
        """Create a new account.

        Args:
            code: Positive, unique account code (e.g. 1112)
            name: Account name
            classification: Classification member, value or Japanese label

        Returns:
            Account ID

        Raises:
            InvalidCodeError: If code is not a positive integer
            InvalidNameError: If name is blank
            ValidationError: If classification is unknown
            DuplicateCodeError: If an account with the code already exists
        """
        if isinstance(code, bool) or not isinstance(code, int) or code <= 0:
            raise errors.InvalidCodeError(f"Account code must be a positive integer, got {code!r}")

        if name is None or not name.strip():
            raise errors.InvalidNameError("Account name must not be blank")

        try:
            parsed = Classification.parse(classification)
        except ValueError as e:
            raise errors.ValidationError(str(e))

        if self.db.get_account_by_code(code) is not None:
            raise errors.DuplicateCodeError(errors.duplicate_account_code(code))

        return self.db.create_account(code=code, name=name.strip(), classification=parsed)

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def get_account_by_code(self, code: int) -> Optional[AccountEntity]:
        """Get account by code."""
        return self.db.get_account_by_code(code)

    def require_account(self, account_id: int) -> AccountEntity:
        """Get account by ID or raise MissingAccountError."""
        account = self.db.get_account(account_id)
        if account is None:
            raise errors.MissingAccountError(errors.account_not_found(account_id))
        return account

    def require_account_by_code(self, code: int) -> AccountEntity:
        """Get account by code or raise MissingAccountError."""
        account = self.db.get_account_by_code(code)
        if account is None:
            raise errors.MissingAccountError(errors.account_code_not_found(code))
        return account

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities ordered by code
        """
        return self.db.list_accounts()
