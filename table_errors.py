class TableError(Exception):
    """Base class for table load, query and save failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"CSV Error: {self.message}"


class TableIoError(TableError):
    """File could not be read or written; reported with the bare OS message."""

    def __str__(self):
        return self.message


class MalformedTableError(TableError):
    pass


class InvalidRangeError(TableError):
    pass


class InvalidIndexError(TableError):
    pass
