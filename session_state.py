from table import Table
from table_file_handler import TableFileHandler


class SessionState:
    def __init__(self, table: Table, file_handler: TableFileHandler):
        self.table = table
        self.file_handler = file_handler

    @property
    def file_path(self) -> str:
        return self.file_handler.path

    @classmethod
    def open(cls, path: str | None = None) -> "SessionState":
        handler = TableFileHandler(path)
        return cls(handler.load(), handler)

    def save(self, path: str | None = None) -> str:
        return self.file_handler.save(self.table, path)
