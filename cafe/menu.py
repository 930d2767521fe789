from termcolor import cprint

from cafe.gateway import DatabaseGateway
from cafe.helpers import UnsupportedOperation, print_banner, prompt

class MenuManager:
    """browse, search and (for managers) prune the cafe menu"""
    def __init__(self, gateway: DatabaseGateway):
        self.gateway = gateway

    def print_full_menu(self) -> int:
        print()
        print_banner("menu")
        rows = self.gateway.execute_query_and_print_result(
            "SELECT itemName, type, price, description FROM Menu ORDER BY type, itemName"
        )
        if rows == 0:
            cprint("menu empty", "red")
        print_banner()
        return rows

    def search_item_name(self, name: str | None = None) -> int:
        """print items whose name matches exactly"""
        if name is None:
            name = prompt("\titem: ")
        print_banner()
        rows = self.gateway.execute_query_and_print_result(
            "SELECT itemName, type, price, description FROM Menu WHERE itemName = ?",
            (name,),
        )
        print_banner()
        if rows == 0:
            print(f"No item named {name}")
        return rows

    def search_item_type(self, kind: str | None = None) -> int:
        """print items of one type"""
        if kind is None:
            kind = prompt("\ttype: ")
        print_banner()
        rows = self.gateway.execute_query_and_print_result(
            "SELECT itemName, type, price, description FROM Menu WHERE type = ? ORDER BY itemName",
            (kind,),
        )
        print_banner()
        if rows == 0:
            print(f"No items of type: {kind}")
        return rows

    def delete_item(self, name: str | None = None) -> bool:
        if name is None:
            name = prompt("\titem to remove: ")
        if self.gateway.execute_query("SELECT itemName FROM Menu WHERE itemName = ?", (name,)) == 0:
            cprint("not found", "red"); return False
        self.gateway.execute_update("DELETE FROM Menu WHERE itemName = ?", (name,))
        cprint(f"deleted {name}", "green")
        return True

    def add_item(self):
        raise UnsupportedOperation("add item")

    def modify_item(self):
        raise UnsupportedOperation("modify item")
