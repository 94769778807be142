"""Utility functions for aoiro."""

from aoiro.utils.date_parser import parse_date
from aoiro.utils.amount_parser import parse_yen
from aoiro.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_yen", "resolve_account"]
