import pytest

from dsakit.billing import (
    InvoiceStore,
    Item,
    Order,
    main,
    render_footer,
    render_header,
    render_invoice,
    render_item,
)


def _order(customer="Alice"):
    return Order(customer, [Item("Tea", 2, 1.5), Item("Cake", 1, 4.0)], date="Nov  3 2021")


def test_order_total_sums_line_amounts():
    order = _order()
    assert order.total() == pytest.approx(2 * 1.5 + 1 * 4.0)


def test_empty_order_total_is_zero():
    assert Order("Bob", [], date="x").total() == 0


def test_header_contains_date_and_customer():
    text = render_header("Alice", "Nov  3 2021")
    assert "\nDate:Nov  3 2021" in text
    assert "\nInvoice to: Alice" in text
    assert "ADV. Restaurant" in text
    assert "Items\t\tQty\t\tTotal\t\t" in text


def test_item_line_format():
    assert render_item(Item("Tea", 2, 1.5)) == "Tea\t\t2\t\t3.00\t\t\n"


def test_footer_values():
    text = render_footer(100.0)
    assert "Sub Total\t\t\t100.00" in text
    assert "Discount @10%\t\t\t10.00" in text
    assert "Grand Total\t\t\t106.20" in text


def test_footer_cgst_equals_sgst():
    lines = render_footer(250.0).splitlines()
    cgst = next(line for line in lines if "CGST" in line).split("\t")[-1]
    sgst = next(line for line in lines if "SGST" in line).split("\t")[-1]
    assert cgst == sgst


def test_invoice_is_header_body_footer():
    order = _order()
    expected = (
        render_header(order.customer, order.date)
        + render_item(order.items[0])
        + render_item(order.items[1])
        + render_footer(order.total())
    )
    assert render_invoice(order) == expected


def test_store_round_trip(tmp_path):
    store = InvoiceStore(tmp_path / "invoices.txt")
    first, second = _order("Alice"), _order("Bob")
    store.save(first)
    store.save(second)
    assert store.load() == [first, second]


def test_store_missing_file_is_empty(tmp_path):
    assert InvoiceStore(tmp_path / "none.txt").load() == []


def test_find_matches_exact_customer(tmp_path):
    store = InvoiceStore(tmp_path / "invoices.txt")
    store.save(_order("Alice"))
    store.save(_order("alice"))
    store.save(_order("Alice"))
    found = store.find("Alice")
    assert len(found) == 2
    assert all(order.customer == "Alice" for order in found)
    assert store.find("Carol") == []


def _feed(monkeypatch, answers):
    replies = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(replies)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_main_generates_and_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "invoices.txt"
    _feed(monkeypatch, ["1", "Alice", "1", "Tea", "2", "1.5", "y", "n"])
    assert main(["--store", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Invoice to: Alice" in out
    assert "Successfully saved" in out
    saved = InvoiceStore(path).load()
    assert [order.customer for order in saved] == ["Alice"]
    assert saved[0].items == [Item("Tea", 2, 1.5)]


def test_main_search_reports_missing(tmp_path, monkeypatch, capsys):
    _feed(monkeypatch, ["3", "Nobody", "n"])
    main(["--store", str(tmp_path / "invoices.txt")])
    assert "Sorry the invoice for Nobody doesn't exist" in capsys.readouterr().out


def test_main_show_all_lists_saved(tmp_path, monkeypatch, capsys):
    path = tmp_path / "invoices.txt"
    InvoiceStore(path).save(_order("Bob"))
    _feed(monkeypatch, ["2", "n"])
    main(["--store", str(path)])
    assert "Invoice to: Bob" in capsys.readouterr().out