import logging
import sys
from typing import Callable, Optional

from config_paths import APP_NAME, MENU_LINES
from session_state import SessionState
from table_errors import TableError, TableIoError


logger = logging.getLogger(__name__)


def parse_index(text: Optional[str]) -> int:
    """Parse a menu number; anything but an optional "+" and ASCII digits becomes 0."""
    text = (text or "").strip()
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(digits)


class MenuShell:
    def __init__(
        self,
        state: SessionState,
        read_line: Callable[[], str] = input,
        out=None,
        err=None,
    ):
        self.state = state
        self._read_line = read_line
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.running = False
        self._commands = {
            1: self.display_all,
            2: self.paginate,
            3: self.delete_row,
            4: self.modify_field,
            5: self.save,
            6: self.exit,
        }

    def run(self):
        self.running = True
        while self.running:
            for line in MENU_LINES:
                self._print(line)
            try:
                choice = parse_index(self._read_line())
            except EOFError:
                logger.debug("Input closed, leaving session")
                self.exit()
                break
            self.dispatch(choice)

    def dispatch(self, choice: int):
        command = self._commands.get(choice)
        if command is None:
            self._print("Invalid choice. Please enter a number between 1 and 6.")
            return
        try:
            command()
        except EOFError:
            self.exit()
        except TableIoError as e:
            self._print(f"Error saving CSV file: {e}", stream=self.err)
        except TableError as e:
            self._print(e.message)

    # ----- commands -----
    def display_all(self):
        self._print_lines(self.state.table.display_lines())

    def paginate(self):
        start = self._ask_int("Enter starting row: ")
        end = self._ask_int("Enter ending row: ")
        self._print_lines(self.state.table.paginate(start, end))

    def delete_row(self):
        row_index = self._ask_int("Enter row index to delete: ")
        self._print_lines(self.state.table.delete_row(row_index))

    def modify_field(self):
        row_index = self._ask_int("Enter row index: ")
        field_index = self._ask_int("Enter field index: ")
        new_value = self._ask("Enter new value: ")
        self._print_lines(
            self.state.table.modify_field(row_index, field_index, new_value)
        )

    def save(self):
        path = self._ask(
            "Enter file path to save CSV (leave it blank to override the file): "
        )
        target = self.state.save(path)
        logger.info("Saved table to %s", target)
        self._print("CSV data saved successfully.")

    def exit(self):
        self._print(f"Exiting {APP_NAME}. Goodbye!")
        self.running = False

    # ----- io helpers -----
    def _ask(self, prompt: str) -> str:
        self._print(prompt)
        return self._read_line().strip()

    def _ask_int(self, prompt: str) -> int:
        return parse_index(self._ask(prompt))

    def _print_lines(self, lines):
        for line in lines:
            self._print(line)

    def _print(self, text: str, stream=None):
        print(text, file=stream if stream is not None else self.out)
