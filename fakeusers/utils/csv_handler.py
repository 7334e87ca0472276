"""CSV writing utilities."""

from pathlib import Path
from typing import Iterable

import pandas as pd


class CSVHandler:
    """Converts generated records to CSV with a fixed column layout."""

    # Record attribute -> CSV header
    COLUMNS = {
        "number": "Number",
        "id": "Id",
        "full_name": "FullName",
        "address": "Address",
        "phone": "Phone",
    }

    def records_to_dataframe(self, records: Iterable) -> pd.DataFrame:
        """
        Build a DataFrame with one row per record.

        Args:
            records: Generated records

        Returns:
            DataFrame with columns Number, Id, FullName, Address, Phone
        """
        rows = [record.model_dump(include=set(self.COLUMNS)) for record in records]
        df = pd.DataFrame(rows, columns=list(self.COLUMNS))
        return df.rename(columns=self.COLUMNS)

    def to_csv_bytes(self, records: Iterable) -> bytes:
        """Serialize records to UTF-8 encoded CSV."""
        df = self.records_to_dataframe(records)
        return df.to_csv(index=False).encode("utf-8")

    def write_csv(self, records: Iterable, output_path: Path) -> int:
        """
        Write records to a CSV file.

        Args:
            records: Generated records
            output_path: Output file path

        Returns:
            Number of rows written
        """
        df = self.records_to_dataframe(records)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False, encoding="utf-8")
        return len(df)
