"""schema + starter data for the local sqlite backend.

the postgres deployment owns its own schema; these statements only mirror it so
the app (and the tests) can run against a plain sqlite file.
"""
from cafe.gateway import DatabaseGateway

TABLES = [
    """--sql
    CREATE TABLE IF NOT EXISTS Users (
        login TEXT PRIMARY KEY,
        password TEXT NOT NULL, -- plaintext, same as the production schema
        phoneNum TEXT,
        favItems TEXT,
        type TEXT NOT NULL DEFAULT 'Customer'
    );
    """,
    """--sql
    CREATE TABLE IF NOT EXISTS Menu (
        itemName TEXT PRIMARY KEY,
        type TEXT NOT NULL,
        price REAL NOT NULL CHECK (price > 0),
        description TEXT,
        imageURL TEXT
    );
    """,
    """--sql
    CREATE TABLE IF NOT EXISTS Orders (
        orderid INTEGER PRIMARY KEY AUTOINCREMENT,
        login TEXT NOT NULL REFERENCES Users(login),
        paid TEXT NOT NULL DEFAULT 'false',
        timeStampRecieved TEXT NOT NULL,
        total REAL NOT NULL
    );
    """,
]

STARTER_MENU = [
    ("Espresso", "Drinks", 3.50, "strong, pure coffee shot"),
    ("Latte", "Drinks", 4.50, "espresso with steamed milk"),
    ("Cappuccino", "Drinks", 4.50, "equal parts espresso, steamed milk and foam"),
    ("Cold Brew", "Drinks", 4.50, "12-hour steeped coffee"),
    ("Croissant", "Pastries", 3.50, "butter croissant"),
    ("Blueberry Muffin", "Pastries", 3.00, "baked every morning"),
    ("BLT", "Sandwiches", 7.25, "bacon, lettuce and tomato on sourdough"),
]

def create_schema(gateway: DatabaseGateway):
    """create tables if missing"""
    for statement in TABLES:
        gateway.execute_update(statement)

def seed(gateway: DatabaseGateway):
    """seed starter menu + default manager once"""
    for name, kind, price, description in STARTER_MENU:
        gateway.execute_update(
            "INSERT OR IGNORE INTO Menu (itemName, type, price, description) VALUES (?, ?, ?, ?)",
            (name, kind, price, description),
        )
    gateway.execute_update(
        "INSERT OR IGNORE INTO Users (login, password, phoneNum, favItems, type) VALUES (?, ?, ?, ?, ?)",
        ("admin", "admin", "", "", "Manager"),
    )
