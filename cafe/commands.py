from dataclasses import dataclass
from typing import Callable

from termcolor import cprint, colored

from cafe.gateway import GatewayError
from cafe.helpers import UnsupportedOperation, read_choice
from cafe.session import Capability, Session

# command infrastructure
@dataclass
class MenuCommand:
    """bind a numbered menu entry to a handler"""
    choice: int
    label: str
    handler: Callable[[], object] | None = None
    capability: Capability | None = None
    exits: bool = False

class CommandMenu:
    """numbered menu whose entries are filtered by the session's capabilities"""
    def __init__(self, title: str, session: Session, commands: list[MenuCommand] | None = None):
        self.title = title
        self.session = session
        self.commands: list[MenuCommand] = list(commands or [])

    def available(self) -> list[MenuCommand]:
        """entries the current role may see; anything else simply isn't listed"""
        return [
            c for c in self.commands
            if c.capability is None or self.session.can(c.capability)
        ]

    def find(self, choice: int) -> MenuCommand | None:
        return next((c for c in self.available() if c.choice == choice), None)

    def render(self):
        cprint(self.title.upper(), "green", attrs=["bold"])
        print("-" * max(len(self.title), 9))
        for cmd in self.available():
            print(f"{colored(str(cmd.choice), 'blue')}. {cmd.label}")

    def dispatch(self, choice: int) -> bool:
        """run the handler for one choice; return true if the menu should close"""
        cmd = self.find(choice)
        if cmd is None:
            cprint("unrecognized choice!", "red")
            return False
        if cmd.handler is not None:
            try:
                cmd.handler()
            except GatewayError as e:
                cprint(f"operation failed: {e}", "red")
            except UnsupportedOperation as e:
                cprint(str(e), "yellow")
        return cmd.exits

    def run_once(self) -> bool:
        """show the menu until a listed choice is picked, then act on it"""
        while True:
            self.render()
            choice = read_choice()
            if self.find(choice) is not None:
                return self.dispatch(choice)
            cprint("unrecognized choice!", "red")
            print()

    def run(self):
        """loop until an exiting entry is picked"""
        while not self.run_once():
            print()
