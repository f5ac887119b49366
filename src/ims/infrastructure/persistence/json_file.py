"""A list of JSON records stored in one file, rewritten on every write."""

from __future__ import annotations

import json
from pathlib import Path


class JsonFile:

    def __init__(self, path: Path) -> None:
        self.path = path
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")

    def read(self) -> list[dict]:
        return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, records: list[dict]) -> None:
        self.path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")

    def upsert(self, record: dict, key: str = "id") -> None:
        """Replace the record with the same *key*, or append it."""
        records = self.read()
        for i, existing in enumerate(records):
            if existing[key] == record[key]:
                records[i] = record
                break
        else:
            records.append(record)
        self.write(records)

    def next_int_id(self) -> int:
        return max((r["id"] for r in self.read()), default=0) + 1
