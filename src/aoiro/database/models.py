"""SQLAlchemy models for aoiro database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Boolean,
    Enum,
    CheckConstraint,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from aoiro.domain.entities import Classification, DepreciationMethod

Base = declarative_base()


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Account(Base):
    """Chart of accounts model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    code = Column(Integer, unique=True, nullable=False)
    name = Column(String, nullable=False)
    classification = Column(
        Enum(Classification, native_enum=False, values_callable=_enum_values, length=16),
        nullable=False,
    )
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("code > 0", name="ck_account_code_positive"),)


class JournalEntry(Base):
    """Journal entry model: one debit line and one credit line."""

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    debit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    debit_amount = Column(Integer, nullable=False)
    credit_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    credit_amount = Column(Integer, nullable=False)
    description = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("debit_amount = credit_amount", name="ck_entry_balanced"),
        CheckConstraint("debit_amount > 0", name="ck_entry_amount_positive"),
        CheckConstraint("debit_account_id <> credit_account_id", name="ck_entry_distinct_accounts"),
    )

    # Relationships
    debit_account = relationship("Account", foreign_keys=[debit_account_id])
    credit_account = relationship("Account", foreign_keys=[credit_account_id])


class FixedAsset(Base):
    """Fixed asset register model."""

    __tablename__ = "fixed_assets"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    acquisition_date = Column(Date, nullable=False)
    acquisition_cost = Column(Integer, nullable=False)
    useful_life = Column(Integer, nullable=False)
    depreciation_method = Column(
        Enum(DepreciationMethod, native_enum=False, values_callable=_enum_values, length=32),
        nullable=False,
        default=DepreciationMethod.STRAIGHT_LINE,
    )
    depreciation_rate = Column(Integer, nullable=False)
    accumulated_dep = Column(Integer, nullable=False, default=0)
    memo = Column(String, nullable=False, default="")
    is_active = Column(Boolean, nullable=False, default=True)


class RentDetail(Base):
    """Rent breakdown model."""

    __tablename__ = "rent_details"

    id = Column(Integer, primary_key=True)
    payee_address = Column(String, nullable=False, default="")
    payee_name = Column(String, nullable=False)
    rent_type = Column(String, nullable=False, default="")
    monthly_rent = Column(Integer, nullable=False, default=0)
    annual_total = Column(Integer, nullable=False, default=0)
    business_ratio = Column(Integer, nullable=False, default=100)
    memo = Column(String, nullable=False, default="")

    __table_args__ = (
        CheckConstraint("business_ratio BETWEEN 1 AND 100", name="ck_rent_business_ratio"),
    )


class LossCarryforward(Base):
    """Net operating loss carryforward model."""

    __tablename__ = "loss_carryforward"

    id = Column(Integer, primary_key=True)
    loss_year = Column(Integer, nullable=False)
    loss_amount = Column(Integer, nullable=False)
    used_year_1 = Column(Integer, nullable=False, default=0)
    used_year_2 = Column(Integer, nullable=False, default=0)
    used_year_3 = Column(Integer, nullable=False, default=0)
    memo = Column(String, nullable=False, default="")

    __table_args__ = (CheckConstraint("loss_amount > 0", name="ck_loss_amount_positive"),)


def _install_sqlite_transactions(engine) -> None:
    """Let SQLAlchemy emit BEGIN so reads inside a session share one SQLite transaction."""

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # Disable pysqlite's own transaction handling; BEGIN is emitted below
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        _install_sqlite_transactions(engine)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
