import json
import os
from datetime import datetime, timezone

from simulator.tape import BLANK

class JSONLogger:
    """Append-only JSON-lines run logs, one file per kind and UTC day."""

    def __init__(self, output_directory="logs/", log_file_prefix="tmsim_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.summary_log = self._path(f"{self.log_file_prefix}{self.today}.jsonl")

    def _path(self, filename):
        return os.path.join(self.output_directory, filename)

    def _append(self, path, entries):
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log_summary(self, entries: list):
        """Run summaries (verdict, steps, final tape) go to the prefixed daily log."""
        self._append(self.summary_log, entries)

    def log_accepted(self, entries: list):
        self._append(self._path(f"accepted_{self.today}.jsonl"), entries)

    def log_rejected(self, entries: list):
        self._append(self._path(f"rejected_{self.today}.jsonl"), entries)

    def log_snapshots(self, run_id: str, snapshots: list, blank: str = "_"):
        """Every snapshot of one run, one line per step."""
        entries = []
        for step, snapshot in enumerate(snapshots):
            tape = snapshot.tape
            entries.append({
                "run_id": run_id,
                "step": step,
                "state": snapshot.state,
                "tape": "".join(blank if cell == BLANK else cell for cell in tape.logical_content()),
                "head": tape.logical_head_offset()
            })
        self._append(self._path(f"snapshots_{self.today}.jsonl"), entries)
