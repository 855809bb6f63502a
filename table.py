import pandas as pd

from pagination import validate_index, validate_range
from table_errors import MalformedTableError


DELIMITER = ","
SEPARATOR = ", "


def split_record(line: str) -> list[str]:
    return [field.strip() for field in line.split(DELIMITER)]


class Table:
    """Rectangular grid of string cells addressed with 1-based indices."""

    def __init__(self, rows=None):
        rows = [list(row) for row in (rows or [])]
        if rows:
            width = len(rows[0])
            for line_no, row in enumerate(rows, start=1):
                if len(row) != width:
                    raise MalformedTableError(
                        f"Inconsistent number of fields in CSV (line {line_no}: "
                        f"expected {width}, found {len(row)})"
                    )
        self.df = pd.DataFrame(rows, dtype=object)

    @classmethod
    def from_lines(cls, lines) -> "Table":
        return cls([split_record(line) for line in lines])

    @property
    def row_count(self) -> int:
        return len(self.df)

    @property
    def column_count(self) -> int:
        return self.df.shape[1]

    @property
    def rows(self) -> list[list[str]]:
        return [list(row) for row in self.df.itertuples(index=False, name=None)]

    def cell(self, row_index: int, field_index: int) -> str:
        message = "Invalid row or field index"
        row = validate_index(row_index, self.row_count, message)
        col = validate_index(field_index, self.column_count, message)
        return self.df.iat[row, col]

    # ----- queries -----
    def display_lines(self) -> list[str]:
        return self._render(self.df)

    def paginate(self, start: int, end: int) -> list[str]:
        lo, hi = validate_range(start, end, self.row_count)
        return self._render(self.df.iloc[lo:hi])

    def serialize(self) -> str:
        return "".join(line + "\n" for line in self.display_lines())

    # ----- mutations -----
    def delete_row(self, row_index: int) -> list[str]:
        row = validate_index(
            row_index, self.row_count, "Invalid row index for deletion"
        )
        self.df = self.df.drop(self.df.index[row]).reset_index(drop=True)
        return self.display_lines()

    def modify_field(self, row_index: int, field_index: int, new_value: str) -> list[str]:
        message = "Invalid row or field index for modification"
        row = validate_index(row_index, self.row_count, message)
        col = validate_index(field_index, self.column_count, message)
        self.df.iat[row, col] = f'"{new_value}"'
        return self.paginate(row_index, row_index)

    @staticmethod
    def _render(df: pd.DataFrame) -> list[str]:
        return [SEPARATOR.join(row) for row in df.itertuples(index=False, name=None)]
