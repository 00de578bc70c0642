"""Cart routes through the full app: session cookie, boundary and redirects."""

from storefront.domain.cart import Cart
from storefront.services.session_store import CART_KEY
from storefront.utils.settings import SESSION_COOKIE_NAME


def _session_cart(client, session_store) -> Cart | None:
    data = session_store.load(client.cookies.get(SESSION_COOKIE_NAME))
    return Cart.from_session(data.get(CART_KEY)) if data else None


class TestAddToCart:

    def test_add_redirects_to_cart_view(self, client):
        response = client.get("/agregar-carro?id=1", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/ver-carro"
        assert SESSION_COOKIE_NAME in response.cookies

    def test_add_twice_merges(self, client, session_store):
        client.get("/agregar-carro?id=2", follow_redirects=False)
        client.get("/agregar-carro?id=2", follow_redirects=False)

        cart = _session_cart(client, session_store)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert str(cart.subtotal) == "51.00"

    def test_two_products(self, client, session_store):
        client.get("/agregar-carro?id=1", follow_redirects=False)
        client.get("/agregar-carro?id=3", follow_redirects=False)

        cart = _session_cart(client, session_store)
        assert [i.product_id for i in cart.items] == [1, 3]

    def test_unknown_product_is_ignored(self, client, session_store):
        response = client.get("/agregar-carro?id=999", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/ver-carro"
        assert _session_cart(client, session_store) is None

    def test_malformed_id_is_ignored(self, client):
        for url in (
            "/agregar-carro",
            "/agregar-carro?id=abc",
            "/agregar-carro?id=-1",
            "/agregar-carro?id=--5",
            "/agregar-carro?id=99999999999999999999999",
        ):
            response = client.get(url, follow_redirects=False)
            assert response.status_code == 302
            assert response.headers["location"] == "/ver-carro"

    def test_carts_are_per_session(self, app, client, session_store):
        from fastapi.testclient import TestClient

        client.get("/agregar-carro?id=1", follow_redirects=False)

        other = TestClient(app)
        other.get("/ver-carro")
        assert other.cookies.get(SESSION_COOKIE_NAME) is None
        assert _session_cart(client, session_store) is not None


class TestViewCart:

    def test_empty_cart_message(self, client):
        response = client.get("/ver-carro")

        assert response.status_code == 200
        assert "no hay productos" in response.text

    def test_shows_lines_and_totals(self, client):
        client.get("/agregar-carro?id=1")
        response = client.get("/agregar-carro?id=1")

        assert response.status_code == 200
        assert "Laptop" in response.text
        assert "512.46" in response.text   # subtotal
        assert "76.87" in response.text    # IVA
        assert "589.33" in response.text   # total


class TestInvoiceDownload:

    def test_empty_cart_redirects(self, client):
        response = client.get("/descargar-factura", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/ver-carro"

    def test_pdf_attachment(self, client):
        client.get("/agregar-carro?id=2")
        response = client.get("/descargar-factura")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.headers["content-disposition"] == "attachment; filename=factura_compra.pdf"
        assert response.content.startswith(b"%PDF")

    def test_cart_is_gone_after_logout(self, logged_client):
        logged_client.get("/agregar-carro?id=2")
        logged_client.get("/logout")

        response = logged_client.get("/descargar-factura", follow_redirects=False)
        assert response.status_code == 302
