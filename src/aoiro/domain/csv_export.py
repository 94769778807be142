"""Journal CSV export."""

import csv
from typing import Iterable, TextIO

from aoiro.domain.entities import JournalEntry

CSV_HEADER = ["日付", "借方科目", "借方金額", "貸方科目", "貸方金額", "摘要"]


def export_journal_csv(entries: Iterable[JournalEntry], stream: TextIO) -> int:
    """Write journal entries as CSV, one row per entry.

    Dates are written as YYYY-MM-DD and amounts as plain integers. Open
    files with ``encoding="utf-8-sig"`` and ``newline=""`` for spreadsheet
    software.

    Args:
        entries: Entries with account names filled in
        stream: Text stream to write to

    Returns:
        Number of entries written
    """
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)

    count = 0
    for entry in entries:
        writer.writerow(
            [
                entry.date.isoformat(),
                entry.debit_account_name or "",
                entry.debit_amount,
                entry.credit_account_name or "",
                entry.credit_amount,
                entry.description,
            ]
        )
        count += 1
    return count
