DEFAULT_TABLE_PATH = "testdata.csv"

APP_NAME = "BootlegEditor3000"

MENU_LINES = [
    f"{APP_NAME} Help:",
    "1. Display entire file",
    "2. Paginate",
    "3. Delete row",
    "4. Modify field",
    "5. Save to CSV",
    "6. Exit",
]

USAGE = (
    "bootleg-editor - interactive editor for comma-delimited tables\n\n"
    "Usage:\n"
    f"  bootleg-editor [path]      (default: {DEFAULT_TABLE_PATH})\n"
    "  bootleg-editor --debug [path]\n"
    "  bootleg-editor -v\n"
)
