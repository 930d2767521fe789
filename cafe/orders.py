import logging
from datetime import datetime, timedelta

from termcolor import cprint, colored

from cafe.gateway import DatabaseGateway
from cafe.helpers import print_banner, prompt, read_choice, safe_float, safe_int
from cafe.session import Capability, Session

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 5
UNPAID_WINDOW = timedelta(hours=24)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

def paid_text(paid: bool) -> str:
    """orders.paid is stored as text so it reads the same on every backend"""
    return "true" if paid else "false"

def is_paid(value: str | None) -> bool:
    return value is not None and value.strip().lower().startswith("t")

class OrderManager:
    """place orders and flip their paid flag"""
    def __init__(self, gateway: DatabaseGateway, session: Session):
        self.gateway = gateway
        self.session = session

    # queries
    def order_count(self) -> int:
        return self.gateway.execute_query("SELECT orderid FROM Orders")

    def next_order_id(self) -> int:
        # ids come from the row count, not a sequence; a concurrent insert
        # with the same id is rejected by the primary key
        return self.order_count() + 1

    def print_recent_orders(self, login: str) -> int:
        """last few orders for one user, newest first"""
        return self.gateway.execute_query_and_print_result(
            "SELECT * FROM Orders WHERE login = ? ORDER BY timeStampRecieved DESC LIMIT ?",
            (login, HISTORY_LIMIT),
        )

    def print_recent_unpaid(self, now: datetime | None = None) -> int:
        """unpaid orders received within the last day"""
        cutoff = (now or datetime.now()) - UNPAID_WINDOW
        rows = self.gateway.execute_query_and_print_result(
            "SELECT * FROM Orders WHERE paid = ? AND timeStampRecieved >= ? ORDER BY timeStampRecieved",
            (paid_text(False), cutoff.strftime(TIMESTAMP_FORMAT)),
        )
        if rows == 0:
            cprint("no unpaid orders in the last 24 hours", "yellow")
        return rows

    def fetch_paid(self, order_id: int) -> str | None:
        rows = self.gateway.execute_query_and_return_result(
            "SELECT paid FROM Orders WHERE orderid = ?", (order_id,)
        )
        return rows[0][0] if rows else None

    def set_paid(self, order_id: int, paid: bool):
        self.gateway.execute_update(
            "UPDATE Orders SET paid = ? WHERE orderid = ?",
            (paid_text(paid), order_id),
        )
        state = "paid" if paid else "unpaid"
        logger.info("order %s marked %s by %s", order_id, state, self.session.login)
        cprint(f"order {order_id} has been updated to be {state}", "green")

    # workflows
    def place_order(self) -> int | None:
        """take an order for an existing user; returns the new order id"""
        order_id = self.next_order_id()
        login = prompt("enter the customer login: ")
        if not self.session.user_exists(login):
            cprint("non-existent login!", "red")
            return None

        print(f"browse order history of user? (last {HISTORY_LIMIT} purchases)")
        print("1: yes")
        print("2: no")
        if read_choice() == 1:
            print_banner()
            if self.print_recent_orders(login) == 0:
                cprint("no previous orders", "yellow")
            print_banner()
            print("abort order? (1: yes)")
            if read_choice() == 1:
                cprint("order aborted", "yellow")
                return None

        print("enter pay status (1 for paid, 0 for unpaid)")
        choice = read_choice()
        if choice not in (0, 1):
            cprint("invalid input!", "red")
        paid = choice == 1

        total = safe_float(prompt("enter total: "))
        if total is None:
            cprint("invalid total!", "red")
            return None

        received = datetime.now().strftime(TIMESTAMP_FORMAT)
        self.gateway.execute_update(
            "INSERT INTO Orders (orderid, login, paid, timeStampRecieved, total) VALUES (?, ?, ?, ?, ?)",
            (order_id, login, paid_text(paid), received, total),
        )
        logger.info("order %s placed for %s", order_id, login)
        cprint(f"order #{order_id} placed for {colored(login, 'yellow')}", "green")
        return order_id

    def update_order(self):
        """customers may only mark an unpaid order paid; managers can set either way"""
        manages = self.session.can(Capability.MANAGE_ORDERS)
        if manages:
            print("output all unpaid orders from the last 24 hours?")
            print("1: yes")
            if read_choice() == 1:
                self.print_recent_unpaid()

        order_id = safe_int(prompt("input the order id to update: "), minimum=1, maximum=self.order_count())
        if order_id is None:
            cprint("invalid order id!", "red")
            return

        if manages:
            self._update_paid_manager(order_id)
        else:
            self._update_paid_customer(order_id)

    def _update_paid_customer(self, order_id: int):
        paid = self.fetch_paid(order_id)
        if paid is None:
            cprint("order not found", "red"); return
        if is_paid(paid):
            cprint("cannot modify this order!", "red"); return
        print("modify paid? (1 if yes)")
        if read_choice() == 1:
            self.set_paid(order_id, True)

    def _update_paid_manager(self, order_id: int):
        print("please input 1 for paid or 2 for unpaid")
        choice = read_choice()
        if choice == 1:
            self.set_paid(order_id, True)
        elif choice == 2:
            self.set_paid(order_id, False)
        else:
            cprint("invalid option", "red")
