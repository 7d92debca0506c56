"""File helpers shared by the JSON-backed repositories.

Each repository owns one JSON file holding a list of records, plus a
``<name>.seq`` file with the highest numeric ID ever seen for it.
"""

from __future__ import annotations

import json
import re
from pathlib import Path


class JsonListFile:

    def __init__(self, file_path: Path, id_prefix: str = "") -> None:
        self._file_path = file_path
        self._seq_path = file_path.with_name(file_path.name + ".seq")
        self._id_prefix = id_prefix
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        # Records about to be dropped still count towards the high-water mark.
        self._remember(highest_sequential_id(self.load(), self._id_prefix))
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def allocate_id(self) -> str:
        """Issue a new ID past every ID seen so far.

        IDs of deleted records are never handed out again: movements and
        audit entries keep pointing at them.
        """
        last = max(self._issued(), highest_sequential_id(self.load(), self._id_prefix))
        self._seq_path.write_text(str(last + 1), encoding="utf-8")
        return f"{self._id_prefix}{last + 1}"

    def _issued(self) -> int:
        if not self._seq_path.exists():
            return 0
        text = self._seq_path.read_text(encoding="utf-8").strip()
        return int(text) if text.isdigit() else 0

    def _remember(self, number: int) -> None:
        if number > self._issued():
            self._seq_path.write_text(str(number), encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


def highest_sequential_id(records: list[dict], prefix: str = "") -> int:
    """Highest numeric ID carrying *prefix*; other IDs are ignored."""
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    numbers = [
        int(match.group(1))
        for match in (pattern.match(str(raw["id"])) for raw in records)
        if match
    ]
    return max(numbers, default=0)
