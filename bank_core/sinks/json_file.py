"""JSON file sink for exporting reports."""

import json
from pathlib import Path

from bank_core.models.results import DispatchReport
from bank_core.sinks.serialization import serialize_value, to_dict
from bank_core.store.accounts import AccountRegistry

INTEREST_REPORT_FILE = "interest_report.json"
DISPATCH_LOG_FILE = "dispatch_log.jsonl"


class JsonFileSink:
    """Write interest reports and dispatch outcomes to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_interest_report(self, registry: AccountRegistry) -> Path:
        """Write the registry's interest report and return the file path."""
        file_path = self.output_dir / INTEREST_REPORT_FILE
        data = {
            "accounts": [to_dict(line) for line in registry.report()],
            "total_annual_interest": serialize_value(registry.total_annual_interest()),
        }

        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(data, f, indent=2, ensure_ascii=False)
            else:
                json.dump(data, f, ensure_ascii=False)

        self._counts[INTEREST_REPORT_FILE] = len(data["accounts"])
        return file_path

    def write_dispatch(self, report: DispatchReport) -> Path:
        """Append one dispatch report as a JSON line."""
        file_path = self.output_dir / DISPATCH_LOG_FILE
        with open(file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(to_dict(report), ensure_ascii=False) + "\n")

        self._counts[DISPATCH_LOG_FILE] = self._counts.get(DISPATCH_LOG_FILE, 0) + 1
        return file_path

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for name, count in self._counts.items():
            print(f"  {name}: {count} records")
