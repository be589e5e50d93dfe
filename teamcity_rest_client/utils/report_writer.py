"""Export status report rows to CSV or Excel."""

from pathlib import Path

import pandas as pd
from openpyxl import Workbook
from openpyxl.utils.dataframe import dataframe_to_rows

# Excel row limit (1,048,576 rows including header)
EXCEL_MAX_ROWS = 1048576

COLUMNS = [
    'project_name',
    'project_id',
    'build_type_name',
    'build_type_id',
    'build_number',
    'status',
    'success',
    'start_date',
    'web_url',
]


class ReportWriter:
    """Writes report rows to a file whose suffix picks the format (.csv or .xlsx)."""

    def write(self, rows, output_file):
        """Write rows to ``output_file``.

        Args:
            rows (list): Row dictionaries keyed by COLUMNS
            output_file (str): Destination path

        Returns:
            Path: The resolved output path
        """
        output_path = Path(output_file).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df = pd.DataFrame(rows, columns=COLUMNS)

        suffix = output_path.suffix.lower()
        if suffix == '.xlsx':
            self._write_xlsx(df, output_path)
        elif suffix == '.csv':
            df.to_csv(output_path, index=False, encoding='utf-8')
        else:
            raise ValueError(f"Unsupported report format '{suffix}', use .csv or .xlsx")
        return output_path

    def _write_xlsx(self, df, output_path):
        if len(df) + 1 > EXCEL_MAX_ROWS:
            raise ValueError(f"Report has {len(df):,} rows, more than Excel can hold")

        wb = Workbook()
        ws = wb.active
        ws.title = 'Build Status'
        for row in dataframe_to_rows(df, index=False, header=True):
            ws.append(row)
        wb.save(output_path)
