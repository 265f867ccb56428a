"""Restaurant invoices: rendering, a file-backed store and an interactive menu."""

from __future__ import annotations

import argparse
import datetime as _dt
import json
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass, field
from pathlib import Path

RESTAURANT = "ADV. Restaurant"
DISCOUNT_RATE = 0.1
GST_RATE = 0.09
DEFAULT_STORE = "invoices.txt"

_WIDE_RULE = "-" * 45


def _today() -> str:
    today = _dt.date.today()
    return f"{today:%b} {today.day:2d} {today.year}"


@dataclass(frozen=True)
class Item:
    """One ordered line: a dish, its quantity and its unit price."""

    name: str
    quantity: int
    price: float

    @property
    def amount(self) -> float:
        return self.quantity * self.price


@dataclass
class Order:
    """A customer's order on a given date."""

    customer: str
    items: list[Item] = field(default_factory=list)
    date: str = field(default_factory=_today)

    def total(self) -> float:
        """Sum of quantity times unit price over all items."""
        return sum(item.amount for item in self.items)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Order:
        return cls(
            customer=data["customer"],
            items=[Item(**entry) for entry in data.get("items", [])],
            date=data.get("date", ""),
        )


def render_header(customer: str, date: str) -> str:
    """Invoice heading with restaurant name, date, customer and column titles."""
    return (
        "\n\n"
        f"\t    {RESTAURANT}"
        "\n\t    --------------------"
        f"\nDate:{date}"
        f"\nInvoice to: {customer}"
        "\n"
        f"{_WIDE_RULE}\n"
        "Items\t\tQty\t\tTotal\t\t"
        f"\n{_WIDE_RULE}"
        "\n\n"
    )


def render_item(item: Item) -> str:
    """One invoice line: name, quantity and line total."""
    return f"{item.name}\t\t{item.quantity}\t\t{item.amount:.2f}\t\t\n"


def render_footer(total: float) -> str:
    """Totals block: 10% discount, then 9% CGST and 9% SGST on the net total."""
    discount = DISCOUNT_RATE * total
    net_total = total - discount
    gst = GST_RATE * net_total
    grand_total = net_total + 2 * gst
    return (
        "\n"
        "-------------------------------\n"
        f"Sub Total\t\t\t{total:.2f}"
        f"\nDiscount @10%\t\t\t{discount:.2f}"
        "\n\t\t\t\t-------"
        f"\n Net Total\t\t\t{net_total:.2f}"
        f"\n CGST @9\t\t\t{gst:.2f}"
        f"\n SGST @9\t\t\t{gst:.2f}"
        "\n-------------------------------------"
        f"\nGrand Total\t\t\t{grand_total:.2f}"
        "\n---------------------------------------\n"
    )


def render_invoice(order: Order) -> str:
    """The whole invoice for ``order``."""
    body = "".join(render_item(item) for item in order.items)
    return render_header(order.customer, order.date) + body + render_footer(order.total())


class InvoiceStore:
    """Invoices kept one JSON record per line in a text file."""

    def __init__(self, path: str | Path = DEFAULT_STORE) -> None:
        self.path = Path(path)

    def save(self, order: Order) -> None:
        """Append ``order`` to the store."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(order.to_dict()) + "\n")

    def load(self) -> list[Order]:
        """Every stored invoice in the order it was saved; none if the file is missing."""
        if not self.path.exists():
            return []
        with self.path.open(encoding="utf-8") as handle:
            return [Order.from_dict(json.loads(line)) for line in handle if line.strip()]

    def find(self, customer: str) -> list[Order]:
        """Stored invoices whose customer name matches exactly."""
        return [order for order in self.load() if order.customer == customer]


_MENU = (
    "\n\nPlease select your preferred option: "
    f"\n\n\t============={RESTAURANT.upper()}============="
    "\n\n1. Generate Invoice"
    "\n2. Show all Invoices"
    "\n3. Search Invoice"
    "\n4. Exit"
)


def _ask_int(prompt: str) -> int:
    while True:
        text = input(prompt).strip()
        try:
            return int(text)
        except ValueError:
            print(f"Not a whole number: {text}")


def _ask_float(prompt: str) -> float:
    while True:
        text = input(prompt).strip()
        try:
            return float(text)
        except ValueError:
            print(f"Not a number: {text}")


def _read_order() -> Order:
    customer = input("\nPlease enter the name of a customer:\t").strip()
    count = _ask_int("\nPlease enter the number of Items:\t")
    items = []
    for index in range(1, count + 1):
        name = input(f"\n\nPlease enter the item {index}:\t").strip()
        quantity = _ask_int("Please enter the quantity:\t")
        price = _ask_float("Please enter the unit price:\t")
        items.append(Item(name, quantity, price))
    return Order(customer, items)


def _print_all(orders: Iterable[Order]) -> None:
    for order in orders:
        print(render_invoice(order), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Interactive invoice menu."""
    parser = argparse.ArgumentParser(description="Restaurant billing.")
    parser.add_argument("--store", default=DEFAULT_STORE, help="invoice file")
    args = parser.parse_args(argv)
    store = InvoiceStore(args.store)
    try:
        while True:
            print(_MENU)
            choice = _ask_int("\n\nPlease select your choice here:\t")
            if choice == 4:
                break
            if choice == 1:
                order = _read_order()
                print(render_invoice(order), end="")
                answer = input("\nDo you want to save the invoice [y/n]:\t").strip()
                if answer.startswith("y"):
                    store.save(order)
                    print("\nSuccessfully saved")
            elif choice == 2:
                print("\n\n  ****Your Previous Invoices****")
                _print_all(store.load())
            elif choice == 3:
                name = input("\nPlease Enter the Name of the customer:\t").strip()
                print(f"\n  ****Invoices Of {name}****")
                found = store.find(name)
                if found:
                    _print_all(found)
                else:
                    print(f"\nSorry the invoice for {name} doesn't exist")
            else:
                print("\nError")
            again = input("\nDo you want to perform another operation [y/n]:\t").strip()
            if not again.startswith("y"):
                break
    except EOFError:
        pass
    print("\n")
    return 0