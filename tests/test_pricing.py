"""
Pricing engine: delta rule, option state, purity.
"""

import random
from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from orderkit.pricing import compute_price, default_selection, option_contribution
from orderkit.schema import Category, Option, OptionSchema, parse_product

from tests.helpers import schema_and_selection


class TestComputePrice:
    def test_default_selection_prices_at_base(self, sauce_only):
        quote = compute_price(sauce_only, {"sauce": ["tomato"]})
        assert quote.unit_price == Decimal(20)
        assert quote.option_state == {("sauce", "tomato"): True, ("sauce", "bbq"): False}

    def test_switching_to_non_default(self, sauce_only):
        # 20 - 0 (tomato dropped) + 1 (bbq)
        quote = compute_price(sauce_only, {"sauce": ["bbq"]})
        assert quote.unit_price == Decimal(21)
        assert quote.is_selected("sauce", "bbq")
        assert not quote.is_selected("sauce", "tomato")

    def test_dropping_a_paid_default_subtracts(self, pizza):
        quote = compute_price(pizza, {"sauce": ["tomato"], "toppings": []})
        assert quote.unit_price == Decimal(18)
        assert quote.is_selected("toppings", "olives") is False

    def test_every_option_has_a_state(self, pizza):
        quote = compute_price(pizza, {})
        assert set(quote.option_state) == {
            ("sauce", "tomato"),
            ("sauce", "bbq"),
            ("toppings", "olives"),
            ("toppings", "salami"),
        }
        assert not any(quote.option_state.values())

    def test_unknown_ids_are_ignored(self, pizza):
        base = compute_price(pizza, {"sauce": ["bbq"]})
        noisy = compute_price(
            pizza,
            {"sauce": ["bbq", "pesto"], "dessert": ["tiramisu"]},
        )
        assert noisy == base
        assert ("dessert", "tiramisu") not in noisy.option_state

    def test_bare_string_is_a_single_choice(self, sauce_only):
        assert compute_price(sauce_only, {"sauce": "bbq"}).unit_price == Decimal(21)

    def test_negative_price_is_not_clamped(self, pizza_data):
        pizza_data["price"] = 1
        schema = parse_product("pizza", pizza_data)
        assert compute_price(schema, {}).unit_price == Decimal(-1)

    def test_price_for_amount(self, sauce_only):
        quote = compute_price(sauce_only, {"sauce": ["bbq"]})
        assert quote.price_for(3) == Decimal(63)

    def test_does_not_mutate_selection(self, pizza):
        selection = {"sauce": ["bbq"], "toppings": ["olives", "salami"]}
        compute_price(pizza, selection)
        assert selection == {"sauce": ["bbq"], "toppings": ["olives", "salami"]}

    def test_option_state_is_read_only(self, pizza):
        quote = compute_price(pizza, {})
        with pytest.raises(TypeError):
            quote.option_state[("sauce", "bbq")] = True  # type: ignore[index]


class TestOptionContribution:
    def test_table(self):
        paid_default = Option("Olives", Decimal(2), is_default=True)
        paid_extra = Option("Salami", Decimal(3))
        assert option_contribution(paid_default, True) == 0
        assert option_contribution(paid_default, False) == Decimal(-2)
        assert option_contribution(paid_extra, True) == Decimal(3)
        assert option_contribution(paid_extra, False) == 0


class TestDefaultSelection:
    def test_lists_defaults_per_category(self, pizza):
        assert default_selection(pizza) == {"sauce": ["tomato"], "toppings": ["olives"]}

    def test_prices_at_base(self, pizza):
        assert compute_price(pizza, default_selection(pizza)).unit_price == pizza.base_price


# ============================================================================
# Properties
# ============================================================================


@given(schema_and_selection())
def test_unit_price_formula(case):
    schema, selection = case
    expected = schema.base_price
    for category_id, category in schema.categories.items():
        chosen = set(selection.get(category_id, ()))
        for option_id, option in category.options.items():
            if option_id in chosen and not option.is_default:
                expected += option.price_delta
            elif option_id not in chosen and option.is_default:
                expected -= option.price_delta
    assert compute_price(schema, selection).unit_price == expected


@given(schema_and_selection(), st.randoms(use_true_random=False))
def test_category_and_option_order_does_not_matter(case, rnd: random.Random):
    schema, selection = case

    category_ids = list(schema.categories)
    rnd.shuffle(category_ids)
    categories = {}
    for category_id in category_ids:
        category = schema.categories[category_id]
        option_ids = list(category.options)
        rnd.shuffle(option_ids)
        categories[category_id] = Category(
            label=category.label,
            options={option_id: category.options[option_id] for option_id in option_ids},
        )
    reordered = OptionSchema(schema.product_id, schema.name, schema.base_price, categories)

    chosen = {key: rnd.sample(list(ids), len(ids)) for key, ids in selection.items()}

    original = compute_price(schema, selection)
    quote = compute_price(reordered, chosen)
    assert quote.unit_price == original.unit_price
    assert dict(quote.option_state) == dict(original.option_state)


@given(schema_and_selection())
def test_same_inputs_same_quote(case):
    schema, selection = case
    assert compute_price(schema, selection) == compute_price(schema, selection)
