"""Invoice rendering from a cart snapshot."""

import pytest

from storefront.domain.cart import Cart
from storefront.domain.exceptions import EmptyCartError
from storefront.services.invoice_service import money, render_invoice
from tests.factories import make_product


def test_renders_pdf_document():
    cart = Cart()
    cart.add_item(make_product(1, "10.00"))
    cart.add_item(make_product(2, "5.00", name="Lápiz & goma"))

    pdf = render_invoice(cart)

    assert pdf.startswith(b"%PDF")
    assert pdf.rstrip().endswith(b"%%EOF")


def test_many_lines_still_render():
    cart = Cart()
    for pid in range(1, 120):
        cart.add_item(make_product(pid, "1.99"))

    assert render_invoice(cart).startswith(b"%PDF")


def test_does_not_change_the_cart():
    cart = Cart()
    cart.add_item(make_product(1, "10.00"))
    before = cart.model_copy(deep=True)

    render_invoice(cart)

    assert cart == before


@pytest.mark.parametrize("cart", [None, Cart()])
def test_refuses_missing_or_empty_cart(cart):
    with pytest.raises(EmptyCartError):
        render_invoice(cart)


def test_money_has_two_decimals():
    from decimal import Decimal

    assert money(Decimal("1.5")) == "$1.50"
    assert money(Decimal("0.0495")) == "$0.05"
