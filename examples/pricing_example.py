"""
Pricing — unit price follows the selection, nothing else.

base_price already includes every default option, so only deviations
from the defaults move the price:

    selected, not default   → + price
    unselected, default     → - price

Run: uv run python -m examples.pricing_example
"""

from orderkit import pricing as P
from orderkit.form import ProductForm
from examples._infra import banner, load_menu, money, run


menu = load_menu()
pizza = menu["pizza"]


async def main() -> None:
    banner("Pricing")

    # 1. Defaults price at base
    start = P.default_selection(pizza)
    quote = P.compute_price(pizza, start)
    print(f"1. Defaults:           {money(quote.unit_price)}")

    # 2. Sour cream instead of tomato (+2), salami (+3), no olives (-2)
    selection = {
        "sauce": ["cream"],
        "toppings": ["redPeppers", "greenPeppers", "mushrooms", "basil", "salami"],
        "crust": ["standard"],
    }
    quote = P.compute_price(pizza, selection)
    print(f"2. Cream+salami-olives: {money(quote.unit_price)}")
    print(f"   olives shown:  {quote.is_selected('toppings', 'olives')}")
    print(f"   salami shown:  {quote.is_selected('toppings', 'salami')}")

    # 3. Unknown ids are ignored
    quote = P.compute_price(pizza, {**selection, "dessert": ["tiramisu"]})
    print(f"3. With unknown category: {money(quote.unit_price)}")

    # 4. Same thing through a form, with an amount
    form = ProductForm(pizza)
    form.select(selection)
    view = form.set_amount(3)
    print(f"4. Form x{view.amount}: {money(view.unit_price)} each, {money(view.price)} total")

    rejected = form.set_amount(42)
    print(f"   amount 42 rejected, still x{rejected.amount}")


if __name__ == "__main__":
    run(main)
