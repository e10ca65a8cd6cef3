import json
from datetime import datetime, timezone
from pathlib import Path


def new_run_entry(text):
    """Result record for one input, filled in as the run progresses."""
    return {
        "input": text,
        "output": None,
        "steps_taken": 0,
        "halted": False,
        "error": None,
    }


class JSONLogger:
    """
    Appends run entries to daily JSON-lines files.

    Every entry goes to <prefix><date>.jsonl; it is also copied to
    halting_<date>.jsonl or failed_<date>.jsonl depending on how the run ended.
    """

    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = Path(output_directory)
        self.log_file_prefix = log_file_prefix
        self.output_directory.mkdir(parents=True, exist_ok=True)
        self.rotate()

    def _daily_path(self, prefix):
        return self.output_directory / f"{prefix}{self.today}.jsonl"

    def _append(self, path, entries):
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def rotate(self):
        """Pick up the current UTC date for all log files."""
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._daily_path(self.log_file_prefix)

    def log(self, entry: dict):
        self._append(self.current_log, [entry])

    def log_batch(self, entries: list):
        self._append(self.current_log, entries)

    def log_halting(self, entries: list):
        self._append(self._daily_path("halting_"), entries)

    def log_failed(self, entries: list):
        self._append(self._daily_path("failed_"), entries)

    def log_runs(self, entries: list):
        """Record finished runs in the main log and split them by outcome."""
        if not entries:
            return
        self.log_batch(entries)
        halting = [e for e in entries if e["halted"]]
        failed = [e for e in entries if not e["halted"]]
        if halting:
            self.log_halting(halting)
        if failed:
            self.log_failed(failed)

    def log_run(self, entry: dict):
        self.log_runs([entry])
