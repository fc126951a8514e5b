"""Reading and writing `|`-delimited record files."""

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path

from diet_book.errors import CorruptRecordError

DELIMITER = "|"


def read_records(path: Path) -> Iterator[tuple[int, list[str]]]:
    """Yield (line number, fields) for every non-blank line of the file.

    Undecodable bytes and malformed csv surface as CorruptRecordError.
    """
    with path.open(newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle, delimiter=DELIMITER)
        try:
            for row in reader:
                if not row or not "".join(row).strip():
                    continue
                yield reader.line_num, row
        except UnicodeDecodeError as exc:
            # The failing line has not been counted yet.
            raise CorruptRecordError(path, reader.line_num + 1, str(exc)) from exc
        except csv.Error as exc:
            raise CorruptRecordError(path, max(reader.line_num, 1), str(exc)) from exc


def write_records(path: Path, rows: Iterable[Iterable[object]]) -> None:
    """Overwrite the file with one line per row."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, delimiter=DELIMITER, lineterminator="\n")
        for row in rows:
            writer.writerow(row)
