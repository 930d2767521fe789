import sys
import signal
import atexit
import logging

from termcolor import cprint

from cafe.commands import CommandMenu, MenuCommand
from cafe.config import ConfigError, Settings, configure_logging
from cafe.gateway import DatabaseGateway, GatewayError
from cafe.menu import MenuManager
from cafe.orders import OrderManager
from cafe.schema import create_schema, seed
from cafe.session import Capability, Session

logger = logging.getLogger(__name__)

EXIT_CHOICE = 9

# application wiring
class Application:
    """build the menu tree around one gateway + session and run it"""
    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway
        self.session = Session(gateway)
        self.menu_manager = MenuManager(gateway)
        self.order_manager = OrderManager(gateway, self.session)

        self.manage_menu = CommandMenu("manage items", self.session, [
            MenuCommand(1, "add item", self.menu_manager.add_item, Capability.MANAGE_ITEMS),
            MenuCommand(2, "delete item", self.menu_manager.delete_item, Capability.MANAGE_ITEMS),
            MenuCommand(3, "modify item", self.menu_manager.modify_item, Capability.MANAGE_ITEMS),
            MenuCommand(EXIT_CHOICE, "go back", exits=True),
        ])
        self.item_menu = CommandMenu("cafe menu", self.session, [
            MenuCommand(1, "view menu", self.menu_manager.print_full_menu, Capability.VIEW_MENU),
            MenuCommand(2, "search for an item", self.menu_manager.search_item_name, Capability.SEARCH_ITEMS),
            MenuCommand(3, "search for a type of item", self.menu_manager.search_item_type, Capability.SEARCH_ITEMS),
            MenuCommand(4, "add/delete/modify item", self.manage_menu.run_once, Capability.MANAGE_ITEMS),
            MenuCommand(EXIT_CHOICE, "go to main menu", exits=True),
        ])
        self.main_menu = CommandMenu("main menu", self.session, [
            MenuCommand(1, "goto menu", self.browse_menu, Capability.VIEW_MENU),
            MenuCommand(2, "update profile", self.session.update_profile, Capability.UPDATE_PROFILE),
            MenuCommand(3, "place an order", self.order_manager.place_order, Capability.PLACE_ORDER),
            MenuCommand(4, "update an order", self.order_manager.update_order, Capability.UPDATE_ORDER),
            MenuCommand(EXIT_CHOICE, "log out", self.session.log_out, exits=True),
        ])
        self.top_menu = CommandMenu("main menu", self.session, [
            MenuCommand(1, "create user", self.session.create_account),
            MenuCommand(2, "log in", self.log_in),
            MenuCommand(3, "bypass login (for lazy developers!)", self.bypass_login),
            MenuCommand(EXIT_CHOICE, "exit", exits=True),
        ])

    def log_in(self):
        if self.session.log_in():
            self.main_menu.run()

    def bypass_login(self):
        self.session.bypass_login()
        self.main_menu.run()

    def browse_menu(self):
        self.menu_manager.print_full_menu()
        self.item_menu.run()

    def shutdown(self):
        print("disconnecting from database...", end=" ")
        self.gateway.close()
        cprint("done", "green")
        print("\nbye!")

    def run(self) -> int:
        """top level loop; returns the process exit status"""
        try:
            self.top_menu.run()
        except EOFError:
            print()
        finally:
            self.shutdown()
        return 0

def greeting():
    cprint(
        "\n*******************************************************\n"
        "                 cafe ordering terminal                \n"
        "*******************************************************\n",
        "green", attrs=["bold"],
    )

def connect(settings: Settings) -> DatabaseGateway:
    """open the gateway for the configured backend"""
    if settings.backend == "sqlite":
        gateway = DatabaseGateway.connect_sqlite(settings.dbname)
        create_schema(gateway)
        seed(gateway)
        return gateway
    return DatabaseGateway.connect_postgres(
        settings.dbname, settings.port, settings.user,
        password=settings.password, host=settings.host,
    )

# signal handler
class SignalHandler:
    """ctrl+c handler that reminds the user about the exit choice"""
    @staticmethod
    def sigint(_, __):
        cprint(f"\nnext time, use {EXIT_CHOICE} to exit!", "yellow")
        sys.exit(0)

# entry point
def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = Settings.from_args(args)
    except ConfigError as e:
        cprint(str(e), "red", file=sys.stderr)
        return 1
    configure_logging(settings.log_level)
    logger.info("starting with %s backend", settings.backend)
    signal.signal(signal.SIGINT, SignalHandler.sigint)

    greeting()
    print("connecting to database...", end=" ")
    try:
        gateway = connect(settings)
    except GatewayError as e:
        print()
        cprint(f"error - unable to connect to database: {e}", "red", file=sys.stderr)
        print(f"make sure you started {settings.backend} on this machine")
        sys.exit(-1)
    cprint("done", "green")
    atexit.register(gateway.close)
    return Application(gateway).run()
