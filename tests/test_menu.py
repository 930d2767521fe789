import pytest

from cafe.helpers import UnsupportedOperation
from cafe.menu import MenuManager

@pytest.fixture
def menu(gateway):
    return MenuManager(gateway)

def test_search_missing_item(menu, add_item, capsys):
    add_item("Espresso")
    assert menu.search_item_name("Latte") == 0
    out = capsys.readouterr().out
    assert "No item named Latte" in out
    assert "itemName" not in out

def test_search_item_by_name(menu, add_item, capsys):
    add_item("Latte", "Drinks", 4.5, "milky")
    add_item("Espresso")
    assert menu.search_item_name("Latte") == 1
    out = capsys.readouterr().out
    assert "itemName\ttype\tprice\tdescription" in out
    assert "Latte\tDrinks\t4.5\tmilky" in out
    assert "Espresso" not in out

def test_search_item_prompts(menu, add_item, feed):
    add_item("Latte")
    feed("Latte")
    assert menu.search_item_name() == 1

def test_search_by_type(menu, add_item, capsys):
    add_item("Latte", "Drinks")
    add_item("Mocha", "Drinks")
    add_item("Croissant", "Pastries")
    assert menu.search_item_type("Drinks") == 2
    assert "Croissant" not in capsys.readouterr().out

def test_search_missing_type(menu, capsys):
    assert menu.search_item_type("Soup") == 0
    assert "No items of type: Soup" in capsys.readouterr().out

def test_full_menu(menu, add_item, capsys):
    add_item("Latte")
    add_item("Croissant", "Pastries")
    assert menu.print_full_menu() == 2

def test_full_menu_empty(menu, capsys):
    assert menu.print_full_menu() == 0
    assert "menu empty" in capsys.readouterr().out

def test_delete_item(menu, gateway, add_item, feed):
    add_item("Latte")
    add_item("Mocha")
    feed("Latte")
    assert menu.delete_item()
    assert gateway.execute_query_and_return_result("SELECT itemName FROM Menu") == [["Mocha"]]

def test_delete_missing_item(menu, gateway, add_item, capsys):
    add_item("Latte")
    assert not menu.delete_item("Mocha")
    assert "not found" in capsys.readouterr().out
    assert gateway.execute_query("SELECT itemName FROM Menu") == 1

def test_delete_is_parameterized(menu, gateway, add_item):
    add_item("Latte")
    assert not menu.delete_item("x' OR '1'='1")
    assert gateway.execute_query("SELECT itemName FROM Menu") == 1

@pytest.mark.parametrize("name", ["add_item", "modify_item"])
def test_unbuilt_operations(menu, name):
    with pytest.raises(UnsupportedOperation):
        getattr(menu, name)()
