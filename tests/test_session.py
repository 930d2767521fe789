import pytest

from cafe.helpers import UnsupportedOperation
from cafe.session import (
    BYPASS_LOGIN,
    Capability,
    CUSTOMER_CAPABILITIES,
    Role,
)

def test_new_session_is_anonymous(session):
    assert not session.is_authenticated
    assert session.role is None
    assert not any(session.can(c) for c in Capability)

def test_create_then_log_in_is_customer(session):
    assert session.create_account("alice", "pw", "555-1111")
    assert not session.is_authenticated
    assert session.log_in("alice", "pw") == "alice"
    assert session.login == "alice"
    assert session.role is Role.CUSTOMER

def test_created_user_row(session, gateway):
    session.create_account("alice", "pw", "555-1111")
    rows = gateway.execute_query_and_return_result(
        "SELECT phoneNum, login, password, favItems, type FROM Users"
    )
    assert rows == [["555-1111", "alice", "pw", "", "Customer"]]

def test_wrong_password_stays_anonymous(session, capsys):
    session.create_account("alice", "pw", "555-1111")
    assert session.log_in("alice", "wrong") is None
    assert not session.is_authenticated
    assert "invalid login or password" in capsys.readouterr().out

def test_duplicate_login_rejected(session, gateway, capsys):
    session.create_account("alice", "pw", "555-1111")
    assert not session.create_account("alice", "other", "555-2222")
    assert "login already taken" in capsys.readouterr().out
    assert gateway.execute_query("SELECT login FROM Users") == 1

def test_empty_login_rejected(session, gateway):
    assert not session.create_account("", "pw", "555")
    assert gateway.execute_query("SELECT login FROM Users") == 0

def test_interactive_create_account(session, feed):
    feed("bob", "secret", "555-3333")
    assert session.create_account()
    assert session.log_in("bob", "secret") == "bob"

def test_interactive_log_in(session, add_user, feed):
    add_user("carol", "pw")
    feed("carol", "pw")
    assert session.log_in() == "carol"

def test_manager_role_looked_up(session, add_user):
    add_user("boss", "pw", role=Role.MANAGER)
    session.log_in("boss", "pw")
    assert session.role is Role.MANAGER
    assert session.can(Capability.MANAGE_ITEMS)

def test_bypass_login_is_manager(session):
    assert session.bypass_login() == BYPASS_LOGIN
    assert session.is_authenticated
    assert session.role is Role.MANAGER

def test_log_out(customer):
    customer.log_out()
    assert not customer.is_authenticated
    assert customer.role is None

def test_customer_capabilities(customer):
    assert customer.can(Capability.VIEW_MENU)
    assert customer.can(Capability.PLACE_ORDER)
    assert not customer.can(Capability.MANAGE_ITEMS)
    assert not customer.can(Capability.MANAGE_ORDERS)

def test_manager_is_superset_of_customer():
    assert CUSTOMER_CAPABILITIES < Role.MANAGER.capabilities

@pytest.mark.parametrize("text, role", [
    ("Manager", Role.MANAGER),
    ("Manager  ", Role.MANAGER),
    ("Customer", Role.CUSTOMER),
    ("Employee", Role.STAFF),
    ("Customer ", Role.CUSTOMER),
    (None, Role.CUSTOMER),
])
def test_role_from_type(text, role):
    assert Role.from_type(text) is role

def test_update_profile_unsupported(customer):
    with pytest.raises(UnsupportedOperation, match="update profile"):
        customer.update_profile()

def test_other_user_type_manages_orders_not_items(session, add_user):
    add_user("emp", "pw", role="Employee")
    session.log_in("emp", "pw")
    assert session.role is Role.STAFF
    assert session.can(Capability.MANAGE_ORDERS)
    assert not session.can(Capability.MANAGE_ITEMS)
