"""Blue-form final statement (青色申告決算書) composer."""

import logging

from aoiro.config import DEFAULT_PURCHASES_CODE, DEFAULT_SALES_CODE
from aoiro.database.base import Database
from aoiro.domain.depreciation import DepreciationService
from aoiro.domain.entities import FinalStatement
from aoiro.domain.loss_carryforward import LossCarryforwardService
from aoiro.domain.rent import RentService
from aoiro.domain.reports import ReportService

logger = logging.getLogger(__name__)


class FinalStatementService:
    """Assembles the four pages of the annual statement."""

    def __init__(
        self,
        db: Database,
        sales_account_code: int = DEFAULT_SALES_CODE,
        purchases_account_code: int = DEFAULT_PURCHASES_CODE,
    ):
        """Initialize final statement service.

        Args:
            db: Database instance
            sales_account_code: Revenue account reported as monthly sales
            purchases_account_code: Expense account reported as purchases
        """
        self.db = db
        self.sales_account_code = sales_account_code
        self.purchases_account_code = purchases_account_code
        self.reports = ReportService(db)
        self.depreciation = DepreciationService(db)
        self.rent = RentService(db)
        self.losses = LossCarryforwardService(db)

    def compose(self, year: int) -> FinalStatement:
        """Build the statement for a year from one consistent view of the books.

        Args:
            year: Fiscal year (January to December)

        Returns:
            FinalStatement with profit and loss, monthly breakdown,
            depreciation, rent, balance sheet and loss carryforward
        """
        with self.db.snapshot():
            profit_loss = self.reports.profit_loss(year)
            monthly = tuple(
                self.reports.monthly_sales_purchases(
                    year,
                    sales_account_code=self.sales_account_code,
                    purchases_account_code=self.purchases_account_code,
                )
            )
            depreciation = self.depreciation.schedule(year)
            rent = self.rent.allocate()
            balance_sheet = self.reports.balance_sheet(year)
            loss_carryforward = self.losses.summarize(year)

        purchases_amount = profit_loss.expense_amount(self.purchases_account_code)
        logger.debug("Composed final statement for %s", year)
        return FinalStatement(
            year=year,
            profit_loss=profit_loss,
            gross_profit=profit_loss.total_revenue - purchases_amount,
            purchases_amount=purchases_amount,
            monthly=monthly,
            annual_sales_total=sum(m.sales for m in monthly),
            annual_purchases_total=sum(m.purchases for m in monthly),
            depreciation=depreciation,
            rent=rent,
            balance_sheet=balance_sheet,
            loss_carryforward=loss_carryforward,
        )
