from termcolor import cprint, colored
from colorama import just_fix_windows_console as enable_windows_ansi_interpretation

# fix windows terminal misinterpreting ansi escape sequences
enable_windows_ansi_interpretation()

BANNER = "*" * 59

class UnsupportedOperation(Exception):
    """raised by operations that exist in the menus but are not built yet"""
    def __init__(self, operation: str):
        super().__init__(f"{operation} is not supported yet")
        self.operation = operation

def safe_int(value: str, minimum: int | None = None, maximum: int | None = None):
    """return int value or none if invalid / out of range"""
    try:
        v = int(value.strip())
    except (ValueError, AttributeError):
        return None
    if minimum is not None and v < minimum:
        return None
    if maximum is not None and v > maximum:
        return None
    return v

def safe_float(value: str):
    """return float value or none if invalid"""
    try:
        return float(value.strip())
    except (ValueError, AttributeError):
        return None

def prompt(label: str) -> str:
    """read one stripped line from the terminal"""
    return input(colored(label, "magenta")).strip()

def read_choice() -> int:
    """keep asking until the user types an integer"""
    while True:
        choice = safe_int(input("please make your choice: "))
        if choice is not None:
            return choice
        cprint("your input is invalid!", "red")

def print_banner(title: str | None = None):
    print(BANNER)
    if title:
        cprint(title.center(len(BANNER)), None, attrs=["bold"])
        print(BANNER)
