from __future__ import annotations

from xlsxreader.domain.models.workbook import Stats, Table


def summarize(table: Table) -> Stats:
    lengths = [len(row) for row in table]
    return Stats(
        row_count=len(lengths),
        max_columns=max(lengths, default=0),
        cell_count=sum(lengths),
    )
