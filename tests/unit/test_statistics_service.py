from xlsxreader.application.services.statistics_service import summarize
from xlsxreader.domain.models.workbook import Stats


def test_summarize_counts_rows_columns_and_cells() -> None:
    table = (("a", "b", "c"), ("d",), ("", "", "", ""))
    assert summarize(table) == Stats(row_count=3, max_columns=4, cell_count=8)


def test_summarize_empty_table() -> None:
    assert summarize(()) == Stats(row_count=0, max_columns=0, cell_count=0)
