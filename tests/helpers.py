"""
Test helpers and Hypothesis strategies.
"""

from decimal import Decimal

from hypothesis import strategies as st
from kungfu import Ok, Error, Result

from orderkit.cart import LineItem
from orderkit.schema import Category, Option, OptionSchema


def make_item(unit_price: int | str, quantity: int = 1, product_id: str = "p") -> LineItem:
    return LineItem(
        product_id=product_id,
        name=product_id.title(),
        unit_price=Decimal(unit_price),
        quantity=quantity,
        options={},
    )


def ok_value[T](result: Result[T, object]) -> T:
    match result:
        case Ok(value):
            return value
        case Error(e):
            raise AssertionError(f"expected Ok, got Error({e!r})")


# ============================================================================
# Strategies
# ============================================================================

ids = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=6)

deltas = st.integers(min_value=0, max_value=50).map(Decimal)

options = st.builds(
    Option,
    label=ids,
    price_delta=deltas,
    is_default=st.booleans(),
)

categories = st.builds(
    Category,
    label=ids,
    options=st.dictionaries(ids, options, max_size=5),
)

schemas = st.builds(
    OptionSchema,
    product_id=ids,
    name=ids,
    base_price=st.integers(min_value=0, max_value=100).map(Decimal),
    categories=st.dictionaries(ids, categories, max_size=4),
)


@st.composite
def schema_and_selection(draw: st.DrawFn) -> tuple[OptionSchema, dict[str, list[str]]]:
    """A schema plus a selection that mixes known and unknown ids."""
    schema = draw(schemas)
    selection: dict[str, list[str]] = {}
    for category_id, category in schema.categories.items():
        known = list(category.options)
        chosen = draw(st.lists(st.sampled_from(known), unique=True)) if known else []
        selection[category_id] = chosen + draw(st.lists(ids, max_size=2))
    extra = draw(st.dictionaries(ids, st.lists(ids, max_size=2), max_size=2))
    for category_id, chosen in extra.items():
        selection.setdefault(category_id, chosen)
    return schema, selection


prices = st.integers(min_value=0, max_value=100)
quantities = st.integers(min_value=1, max_value=9)
