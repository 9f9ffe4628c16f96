"""Tests for staged product edits and validation."""

import pytest

from stock_dashboard.form import (
    FORM_FIELDS,
    INVALID,
    REQUIRED,
    STARRED_FIELDS,
    FormMode,
    ProductDraft,
    coerce_stock,
    parse_price,
    submit,
    to_fields,
    validate,
)
from stock_dashboard.models import Product


class SaveSpy:
    """Records calls to the save callback."""

    def __init__(self):
        self.calls = []

    def __call__(self, fields, product_id):
        self.calls.append((fields, product_id))


class TestDraft:
    """Tests for ProductDraft."""

    def test_create_mode(self):
        draft = ProductDraft.from_product(None)
        assert draft.mode == FormMode.Create
        assert draft.title == "Add Product"
        assert draft.name == ""
        assert draft.price == ""
        assert draft.stock == "0"

    def test_edit_mode_prefills(self):
        product = Product(
            id=4, name="Lamp", price=15.5, category="Home", stock=3, description="LED"
        )
        draft = ProductDraft.from_product(product)
        assert draft.mode == FormMode.Edit
        assert draft.title == "Edit Product"
        assert draft.id == 4
        assert (draft.name, draft.price, draft.category) == ("Lamp", "15.5", "Home")
        assert (draft.stock, draft.description) == ("3", "LED")

    def test_whole_prices_have_no_decimals(self):
        product = Product(id=1, name="Mug", price=199, category="Kitchen")
        assert ProductDraft.from_product(product).price == "199"

    def test_with_value(self):
        draft = ProductDraft().with_value("name", "Mug")
        assert draft.name == "Mug"

    def test_with_value_rejects_unknown_field(self):
        with pytest.raises(KeyError):
            ProductDraft().with_value("id", "3")


class TestValidation:
    """Tests for validate()."""

    def test_valid_draft(self):
        draft = ProductDraft(name="X", price="5", category="Y")
        assert validate(draft) == {}

    @pytest.mark.parametrize("name", ["", "   "])
    def test_name_required(self, name):
        errors = validate(ProductDraft(name=name, price="5", category="Y"))
        assert errors == {"name": REQUIRED}

    @pytest.mark.parametrize("price", ["", "abc", "1.2.3", "nan", "inf", "-1"])
    def test_price_invalid(self, price):
        errors = validate(ProductDraft(name="X", price=price, category="Y"))
        assert errors == {"price": INVALID}

    def test_category_required(self):
        errors = validate(ProductDraft(name="X", price="5", category=" "))
        assert errors == {"category": REQUIRED}

    def test_all_errors_reported(self):
        errors = validate(ProductDraft())
        assert errors == {"name": REQUIRED, "price": INVALID, "category": REQUIRED}

    def test_stock_and_description_unchecked(self):
        draft = ProductDraft(name="X", price="5", category="Y", stock="lots", description="")
        assert validate(draft) == {}

    def test_starred_stock_is_never_an_error(self):
        """Stock carries the " *" marker but is coerced, not validated."""
        assert set(STARRED_FIELDS) == set(FORM_FIELDS) - {"description"}
        errors = validate(ProductDraft(name="X", price="5", category="Y", stock=""))
        assert "stock" not in errors


class TestCoercion:
    """Tests for price and stock coercion."""

    @pytest.mark.parametrize("text,expected", [("5", 5.0), ("0", 0.0), ("12.75", 12.75)])
    def test_parse_price(self, text, expected):
        assert parse_price(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [("", 0), ("7", 7), ("7.9", 7), ("-3", 0), ("many", 0)],
    )
    def test_coerce_stock(self, text, expected):
        assert coerce_stock(text) == expected

    def test_to_fields(self):
        fields = to_fields(ProductDraft(name="X", price="5", category="Y", stock="2"))
        assert fields.price == 5
        assert isinstance(fields.price, float)
        assert fields.stock == 2

    def test_to_fields_rejects_invalid_price(self):
        with pytest.raises(ValueError):
            to_fields(ProductDraft(name="X", price="abc", category="Y"))


class TestSubmit:
    """Tests for submit()."""

    def test_empty_name_does_not_save(self):
        save = SaveSpy()
        errors = submit(ProductDraft(name="", price="5", category="Y"), save)
        assert errors["name"] == "Required"
        assert save.calls == []

    def test_bad_price_does_not_save(self):
        save = SaveSpy()
        errors = submit(ProductDraft(name="X", price="abc", category="Y"), save)
        assert errors["price"] == "Invalid"
        assert save.calls == []

    def test_valid_draft_saves_coerced_values(self):
        save = SaveSpy()
        errors = submit(ProductDraft(name="X", price="5", category="Y"), save)

        assert errors == {}
        assert len(save.calls) == 1
        fields, product_id = save.calls[0]
        assert fields.price == 5
        assert fields.stock == 0
        assert product_id is None

    def test_edit_passes_id(self):
        save = SaveSpy()
        product = Product(id=9, name="Lamp", price=15, category="Home")
        submit(ProductDraft.from_product(product).with_value("name", "Lamp XL"), save)

        fields, product_id = save.calls[0]
        assert product_id == 9
        assert fields.name == "Lamp XL"
