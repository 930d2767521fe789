from enum import Enum

from termcolor import cprint, colored

from cafe.gateway import DatabaseGateway
from cafe.helpers import UnsupportedOperation, prompt

BYPASS_LOGIN = "admin"

class Capability(Enum):
    """things a menu can offer; roles are just sets of these"""
    VIEW_MENU = "view menu"
    SEARCH_ITEMS = "search items"
    MANAGE_ITEMS = "manage items"
    UPDATE_PROFILE = "update profile"
    PLACE_ORDER = "place order"
    UPDATE_ORDER = "update order"
    MANAGE_ORDERS = "manage orders"

CUSTOMER_CAPABILITIES = frozenset({
    Capability.VIEW_MENU,
    Capability.SEARCH_ITEMS,
    Capability.UPDATE_PROFILE,
    Capability.PLACE_ORDER,
    Capability.UPDATE_ORDER,
})

STAFF_CAPABILITIES = CUSTOMER_CAPABILITIES | {
    Capability.MANAGE_ORDERS,
}

MANAGER_CAPABILITIES = STAFF_CAPABILITIES | {
    Capability.MANAGE_ITEMS,
}

class Role(Enum):
    """value is the text stored in Users.type"""
    CUSTOMER = "Customer"
    MANAGER = "Manager"
    # any other Users.type (employees etc.)
    STAFF = "Staff"

    @classmethod
    def from_type(cls, text: str | None) -> "Role":
        """customers and managers by name; every other stored type is staff"""
        if text is None:
            return cls.CUSTOMER
        text = text.strip()
        if text == cls.CUSTOMER.value:
            return cls.CUSTOMER
        if text == cls.MANAGER.value:
            return cls.MANAGER
        return cls.STAFF

    @property
    def capabilities(self) -> frozenset[Capability]:
        return {
            Role.CUSTOMER: CUSTOMER_CAPABILITIES,
            Role.STAFF: STAFF_CAPABILITIES,
            Role.MANAGER: MANAGER_CAPABILITIES,
        }[self]

class Session:
    """anonymous until log_in / bypass_login, then (login, role) until log_out"""
    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway
        self.login: str | None = None
        self.role: Role | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.login is not None

    def can(self, capability: Capability) -> bool:
        """true if the current role holds the capability (anonymous holds none)"""
        return self.role is not None and capability in self.role.capabilities

    def _reset(self):
        self.login = None
        self.role = None

    def user_exists(self, login: str) -> bool:
        return self.gateway.execute_query("SELECT login FROM Users WHERE login = ?", (login,)) > 0

    def lookup_role(self, login: str) -> Role:
        rows = self.gateway.execute_query_and_return_result("SELECT type FROM Users WHERE login = ?", (login,))
        return Role.from_type(rows[0][0] if rows else None)

    def create_account(self, login: str | None = None, password: str | None = None, phone: str | None = None) -> bool:
        """insert a new customer; never changes who is logged in"""
        if login is None:
            login = prompt("\tenter user login: ")
        if password is None:
            password = prompt("\tenter user password: ")
        if phone is None:
            phone = prompt("\tenter user phone: ")
        if not login:
            cprint("login cannot be empty", "red"); return False
        if self.user_exists(login):
            cprint("login already taken", "red"); return False
        self.gateway.execute_update(
            "INSERT INTO Users (phoneNum, login, password, favItems, type) VALUES (?, ?, ?, ?, ?)",
            (phone, login, password, "", Role.CUSTOMER.value),
        )
        cprint("user successfully created!", "green")
        return True

    def log_in(self, login: str | None = None, password: str | None = None) -> str | None:
        """check credentials; on success the session becomes authenticated and the login is returned"""
        if login is None:
            login = prompt("\tenter user login: ")
        if password is None:
            password = prompt("\tenter user password: ")
        matches = self.gateway.execute_query(
            "SELECT login FROM Users WHERE login = ? AND password = ?",
            (login, password),
        )
        if matches < 1:
            cprint("invalid login or password", "red")
            return None
        self.login = login
        self.role = self.lookup_role(login)
        prefix = "manager: " if self.role is Role.MANAGER else ""
        cprint(f"logged in as {prefix}{colored(login, 'yellow', attrs=['bold'])}", "green")
        return login

    def bypass_login(self) -> str:
        """skip the credential check and act as a manager (testing shortcut)"""
        self.login = BYPASS_LOGIN
        self.role = Role.MANAGER
        cprint(f"bypassed login, acting as manager: {colored(BYPASS_LOGIN, 'yellow', attrs=['bold'])}", "yellow")
        return self.login

    def log_out(self):
        if self.login is None:
            cprint("no user logged in", "red"); return
        cprint(f"logged out {self.login}", "green")
        self._reset()

    def update_profile(self):
        raise UnsupportedOperation("update profile")
