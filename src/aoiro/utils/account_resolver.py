"""Utility for resolving account codes and names to IDs."""

from aoiro.domain.account import AccountService
from aoiro.domain.errors import MissingAccountError


def resolve_account(account_service: AccountService, account: str | int) -> int:
    """Resolve an account code or name to account ID.

    Numbers are treated as account codes (e.g. 1112), anything else as the
    account name (e.g. "普通預金").

    Args:
        account_service: AccountService instance
        account: Account code (int or its string form) or account name

    Returns:
        Account ID

    Raises:
        MissingAccountError: If account is not found
    """
    if isinstance(account, int):
        return account_service.require_account_by_code(account).id

    try:
        code = int(account)
    except (ValueError, TypeError):
        code = None

    if code is not None:
        return account_service.require_account_by_code(code).id

    for acc in account_service.list_accounts():
        if acc.name == account:
            return acc.id

    raise MissingAccountError(f"Account '{account}' not found")
