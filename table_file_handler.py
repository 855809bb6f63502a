import logging
import os

from config_paths import DEFAULT_TABLE_PATH
from table import Table
from table_errors import TableIoError


logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    r"""Split records on "\n" only; a "\r" right before the "\n" is dropped."""
    lines = text.split("\n")
    last = lines.pop()
    lines = [line.removesuffix("\r") for line in lines]
    if last:
        lines.append(last)
    return lines


class TableFileHandler:
    """Reads and writes a Table as comma-delimited text.

    Loading splits on a bare ``,`` and trims every field; saving joins with
    ``", "``. Reloading a saved file therefore gives back the same cells.
    """

    def __init__(self, path: str | None = None):
        self.path = path or DEFAULT_TABLE_PATH

    def load(self) -> Table:
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise TableIoError(str(exc)) from exc
        lines = split_lines(text)
        table = Table.from_lines(lines)
        logger.debug(
            "Loaded %s (%d rows, %d fields)",
            self.path,
            table.row_count,
            table.column_count,
        )
        return table

    def save(self, table: Table, path: str | None = None) -> str:
        target = self.resolve_save_path(path)
        payload = table.serialize()
        try:
            with open(target, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as exc:
            raise TableIoError(str(exc)) from exc
        logger.debug("Saved %d rows to %s", table.row_count, target)
        return target

    def resolve_save_path(self, path: str | None) -> str:
        path = (path or "").strip()
        if not path:
            return self.path
        return os.path.expanduser(path)
