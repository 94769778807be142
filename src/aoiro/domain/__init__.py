"""Domain layer for aoiro application."""

from importlib import import_module

_SERVICES = {
    "AccountService": "aoiro.domain.account",
    "JournalService": "aoiro.domain.journal",
    "ReportService": "aoiro.domain.reports",
    "DepreciationService": "aoiro.domain.depreciation",
    "RentService": "aoiro.domain.rent",
    "LossCarryforwardService": "aoiro.domain.loss_carryforward",
    "FinalStatementService": "aoiro.domain.final_statement",
}

__all__ = list(_SERVICES)


# Services import the database layer, which imports domain entities;
# load them lazily to avoid circular dependencies
def __getattr__(name):
    if name in _SERVICES:
        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
