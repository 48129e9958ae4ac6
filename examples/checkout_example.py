"""
Checkout — build the order payload and submit it.

The backend is faked with httpx.MockTransport: the first order is
accepted, the second is refused with 503. Both outcomes come back as a
Result; nothing is swallowed.

Run: uv run python -m examples.checkout_example
"""

import json

import httpx
from kungfu import Ok, Error

from orderkit import payload as Pl
from orderkit import submit as Sb
from orderkit.cart import Cart
from orderkit.config import BackendConfig, CartConfig
from orderkit.form import ProductForm
from examples._infra import banner, load_menu, money, run


menu = load_menu()
received: list[dict[str, object]] = []


def fake_backend(request: httpx.Request) -> httpx.Response:
    if received:
        return httpx.Response(503, json={"error": "kitchen closed"})
    body = json.loads(request.content)
    received.append(body)
    return httpx.Response(201, json={"id": len(received), **body})


async def main() -> None:
    banner("Checkout")

    cart = Cart(CartConfig())
    form = ProductForm(menu["breakfast"])
    form.select({"coffee": ["espresso"]})
    form.set_amount(2)
    cart.add(form.line_item())
    cart.add(ProductForm(menu["cake"]).line_item())

    customer = Pl.CustomerFields(address="Via Roma 1", phone="555-0100")
    print("Payload:")
    print(json.dumps(Pl.to_wire(Pl.build_payload(cart, customer)), indent=2))

    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_backend)) as client:
        service = Sb.OrderService(Sb.HttpTransport(BackendConfig(), client))

        print("\n1. First order:")
        match await service.send(cart, customer):
            case Ok(receipt):
                print(f"   accepted, total {money(receipt.payload.total_price)}")
                print(f"   cart now: {len(cart)} items")
            case Error(e):
                print(f"   [{e.code}] {e.message}")

        print("\n2. Second order:")
        cart.add(ProductForm(menu["cake"]).line_item())
        match await service.send(cart, customer):
            case Ok(receipt):
                print(f"   accepted? {receipt.response}")
            case Error(e):
                print(f"   [{e.code}] status={e.status}")
                print(f"   cart kept: {len(cart)} items")


if __name__ == "__main__":
    run(main)
