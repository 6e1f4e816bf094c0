"""Sample catalog loaded into an empty store at start-up."""

from __future__ import annotations

from decimal import Decimal

from pms.domain.model.stock_item import StockItem


def _item(name: str, description: str, price: str, category: str, quantity: int) -> StockItem:
    return StockItem(
        id=0,
        name=name,
        description=description,
        price=Decimal(price),
        category=category,
        stock_quantity=quantity,
    )


SAMPLE_ITEMS: tuple[StockItem, ...] = (
    _item("Laptop", "Powerful gaming laptop", "75000", "Electronics", 10),
    _item("iPhone 15 Pro", "Apple flagship smartphone", "85000", "Electronics", 15),
    _item("Logitech Wireless Mouse", "Ergonomic wireless mouse", "2500", "Peripherals", 50),
    _item("Mechanical Keyboard", "RGB backlight, Cherry MX switches", "8500", "Peripherals", 20),
    _item("Samsung 27\" Monitor", "4K monitor with IPS panel", "35000", "Electronics", 10),
    _item("Apple AirPods Pro 2", "Premium noise-cancelling earbuds", "25000", "Audio", 8),
    _item("Logitech C920 Webcam", "Full HD webcam for streaming", "7500", "Peripherals", 30),
    _item("Samsung SSD 1TB", "Fast solid-state drive", "9500", "Components", 40),
    _item("Razer Gaming Mouse", "High-precision mouse for gamers", "6500", "Peripherals", 25),
    _item("USB Hub 7 Ports", "Powered USB 3.0 hub", "2000", "Accessories", 60),
)
