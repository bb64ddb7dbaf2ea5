"""CSV file sink for exporting listings to spreadsheets."""

from pathlib import Path

from property_gen.exceptions import SinkError
from property_gen.logging import get_logger
from property_gen.models import PropertyRecord
from property_gen.sinks.csv_export import render_csv

logger = get_logger(__name__)


class CsvFileSink:
    """Output listings to CSV files.

    Parameters
    ----------
    output_dir : str | Path
        Directory to write CSV files.
    include_agent : bool
        Add agent name, phone and broker columns.
    """

    def __init__(self, output_dir: str | Path, include_agent: bool = True) -> None:
        self.output_dir = Path(output_dir)
        self.include_agent = include_agent
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[PropertyRecord]) -> Path:
        """Write listings to ``<name>.csv``."""
        file_path = self.output_dir / f"{name}.csv"

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(render_csv(records, include_agent=self.include_agent))
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        logger.info("Wrote %d listings to %s", len(records), file_path)
        self._counts[name] = len(records)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"CSV files written to: {self.output_dir}")
        for name, count in self._counts.items():
            print(f"  {name}.csv: {count} records")
