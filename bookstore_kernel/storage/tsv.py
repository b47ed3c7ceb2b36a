"""
Tab-separated flat-file record storage.

One file per record set under a data directory: ``accounts.tsv``,
``books.tsv`` and ``finance.tsv``.  Each line is one record, fields joined
by a tab.  Every persist rewrites the whole file through a temporary file
and an atomic rename, so a crash mid-write leaves the previous version.
Lines with the wrong arity or unparsable numbers are skipped on load.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Sequence

from bookstore_kernel.domain.records import RecordKind
from bookstore_kernel.logging_config import get_logger
from bookstore_kernel.storage import codec
from bookstore_kernel.storage.base import Record, RecordStorage

logger = get_logger("storage.tsv")

FILE_NAMES: dict[RecordKind, str] = {
    RecordKind.ACCOUNTS: "accounts.tsv",
    RecordKind.BOOKS: "books.tsv",
    RecordKind.LEDGER: "finance.tsv",
}


class TsvRecordStorage(RecordStorage):
    """Flat-file storage rooted at ``data_dir`` (created on demand)."""

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, kind: RecordKind) -> Path:
        return self._data_dir / FILE_NAMES[kind]

    def load_all(self, kind: RecordKind) -> list[Record]:
        path = self.path_for(kind)
        if not path.exists():
            return []

        records: list[Record] = []
        skipped = 0
        with path.open("r", encoding="utf-8", newline="") as f:
            for line_no, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line:
                    continue
                try:
                    records.append(codec.decode(kind, line.split("\t")))
                except ValueError:
                    skipped += 1
                    logger.warning(
                        "record_skipped",
                        extra={"kind": kind.value, "line": line_no},
                    )

        logger.debug(
            "records_loaded",
            extra={"kind": kind.value, "count": len(records), "skipped": skipped},
        )
        return records

    def persist_all(self, kind: RecordKind, records: Sequence[Record]) -> None:
        path = self.path_for(kind)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._data_dir, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                for record in records:
                    f.write("\t".join(codec.encode(kind, record)))
                    f.write("\n")
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(
            "records_persisted",
            extra={"kind": kind.value, "count": len(records)},
        )
