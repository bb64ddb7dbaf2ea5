"""JSON file sink for exporting listings to files."""

import json
from pathlib import Path

from property_gen.exceptions import SinkError
from property_gen.logging import get_logger
from property_gen.models import PropertyRecord
from property_gen.sinks.serialization import record_to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Output listings to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = True) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: list[PropertyRecord]) -> Path:
        """Write listings to ``<name>.json`` as a single array.

        Returns
        -------
        Path
            Path of the written file.
        """
        file_path = self.output_dir / f"{name}.json"
        data = [record_to_dict(record) for record in records]

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as exc:
            raise SinkError(f"Failed to write {file_path}: {exc}") from exc

        logger.info("Wrote %d listings to %s", len(records), file_path)
        self._counts[name] = len(records)
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for name, count in self._counts.items():
            print(f"  {name}.json: {count} records")
