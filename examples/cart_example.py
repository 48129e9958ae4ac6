"""
Cart — totals are recomputed from the line items after every change.

Driven through the notifier, the way a UI would:
    event → handler → new CartSnapshot → listeners

Run: uv run python -m examples.cart_example
"""

from decimal import Decimal

from kungfu import Ok, Error

from orderkit import notify as N
from orderkit.cart import Cart, CartSnapshot
from orderkit.config import CartConfig
from orderkit.form import ProductForm
from examples._infra import banner, load_menu, money, run


menu = load_menu()
cart = Cart(CartConfig(delivery_fee=Decimal(20)))

bus = N.standard().compile().inject(Cart, cart)


def render(snap: CartSnapshot) -> None:
    print(
        f"   [{snap.total_count} items] subtotal {money(snap.subtotal)}"
        f" + delivery {money(snap.delivery_fee)} = {money(snap.grand_total)}"
    )


for event_type in (N.AddToCart, N.LineItemRemoved, N.LineQuantityChanged):
    bus.subscribe(event_type, render)


async def main() -> None:
    banner("Cart")

    pizza = ProductForm(menu["pizza"])
    salad = ProductForm(menu["salad"])

    print("1. Pizza with salami, x2:")
    bus.dispatch(N.SelectionChanged(pizza, {"sauce": "tomato", "toppings": ["salami"], "crust": "thin"}))
    bus.dispatch(N.AmountChanged(pizza, 2))
    bus.dispatch(N.AddToCart(pizza))

    print("2. Default salad:")
    bus.dispatch(N.AddToCart(salad))

    first, second = cart.snapshot().line_items
    print("3. Three pizzas instead:")
    bus.dispatch(N.LineQuantityChanged(first, 3))

    print("4. Remove everything (salad twice):")
    bus.dispatch(N.LineItemRemoved(second))
    bus.dispatch(N.LineItemRemoved(second))
    bus.dispatch(N.LineItemRemoved(first))

    print("5. Unregistered event:")

    class Ping(N.Event[None]):
        pass

    match bus.dispatch(Ping()):
        case Ok(_):
            print("   handled?")
        case Error(e):
            print(f"   [{e.code}] {e.message}")


if __name__ == "__main__":
    run(main)
