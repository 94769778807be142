"""Shared pytest fixtures for aoiro tests."""

import tempfile
import os
import pytest

from aoiro.database.factories import create_sqlite_database
from aoiro.domain.account import AccountService
from aoiro.domain.depreciation import DepreciationService
from aoiro.domain.final_statement import FinalStatementService
from aoiro.domain.journal import JournalService
from aoiro.domain.loss_carryforward import LossCarryforwardService
from aoiro.domain.rent import RentService
from aoiro.domain.reports import ReportService


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep AOIRO_* variables from the developer's shell out of the tests."""
    for name in ("AOIRO_DB_PATH", "AOIRO_SALES_CODE", "AOIRO_PURCHASES_CODE", "AOIRO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def journal_service(temp_db):
    """Create a JournalService with a temporary database."""
    return JournalService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def depreciation_service(temp_db):
    """Create a DepreciationService with a temporary database."""
    return DepreciationService(temp_db)


@pytest.fixture
def rent_service(temp_db):
    """Create a RentService with a temporary database."""
    return RentService(temp_db)


@pytest.fixture
def loss_service(temp_db):
    """Create a LossCarryforwardService with a temporary database."""
    return LossCarryforwardService(temp_db)


@pytest.fixture
def final_statement_service(temp_db):
    """Create a FinalStatementService with a temporary database."""
    return FinalStatementService(temp_db)


@pytest.fixture
def sample_accounts(account_service):
    """Create the default chart of accounts and return accounts by code."""
    from aoiro.cli.commands.init_accounts import DEFAULT_ACCOUNTS

    for code, name, classification in DEFAULT_ACCOUNTS:
        account_service.create_account(code=code, name=name, classification=classification)

    return {acc.code: acc for acc in account_service.list_accounts()}


@pytest.fixture
def add_entry(journal_service, sample_accounts):
    """Return a helper recording an entry between two account codes."""

    def _add(entry_date, debit_code, credit_code, amount, description=""):
        return journal_service.create_entry(
            date=entry_date,
            debit_account_id=sample_accounts[debit_code].id,
            debit_amount=amount,
            credit_account_id=sample_accounts[credit_code].id,
            credit_amount=amount,
            description=description,
        )

    return _add


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
