import pytest

from cafe.gateway import DatabaseGateway
from cafe.schema import create_schema
from cafe.session import Role, Session

@pytest.fixture
def gateway():
    gw = DatabaseGateway.connect_sqlite(":memory:")
    create_schema(gw)
    yield gw
    gw.close()

@pytest.fixture
def feed(monkeypatch):
    """script the lines the terminal would type; running out behaves like ctrl+d"""
    def _feed(*lines: str):
        remaining = iter(lines)

        def fake_input(_prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed

@pytest.fixture
def add_user(gateway):
    def _add(login, password="pw", phone="555-0000", role=Role.CUSTOMER):
        gateway.execute_update(
            "INSERT INTO Users (login, password, phoneNum, favItems, type) VALUES (?, ?, ?, ?, ?)",
            (login, password, phone, "", role.value if isinstance(role, Role) else role),
        )
    return _add

@pytest.fixture
def add_order(gateway):
    def _add(order_id, login, paid="false", received="2026-01-01 12:00:00", total=4.5):
        gateway.execute_update(
            "INSERT INTO Orders (orderid, login, paid, timeStampRecieved, total) VALUES (?, ?, ?, ?, ?)",
            (order_id, login, paid, received, total),
        )
    return _add

@pytest.fixture
def add_item(gateway):
    def _add(name, kind="Drinks", price=4.5, description=""):
        gateway.execute_update(
            "INSERT INTO Menu (itemName, type, price, description) VALUES (?, ?, ?, ?)",
            (name, kind, price, description),
        )
    return _add

@pytest.fixture
def session(gateway):
    return Session(gateway)

@pytest.fixture
def customer(session, add_user):
    add_user("alice", "pw")
    session.log_in("alice", "pw")
    return session

@pytest.fixture
def manager(session):
    session.bypass_login()
    return session
