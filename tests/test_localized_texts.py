"""Тесты сервиса поиска текстов"""

import pytest

from culture import Culture
from localization_errors import InvalidArgumentError, KeyDerivationError, ResourceNotFoundError
from localized_texts import LocalizedTexts
from resource_keys import TextResourceKey


@pytest.fixture
def culture():
    return {"current": Culture("en-US")}


@pytest.fixture
def texts(store, culture):
    return LocalizedTexts(store, lambda: culture["current"])


class CustomerViewModel:
    pass


def test_resolve_returns_text_verbatim(texts):
    assert texts.resolve("ApplicationMessages_SaveFailed") == "Saving failed: {0}"


@pytest.mark.parametrize("key", ["", "   ", None])
def test_resolve_rejects_blank_keys(texts, key):
    with pytest.raises(InvalidArgumentError):
        texts.resolve(key)


def test_resolve_missing_key(texts):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        texts.resolve("Missing_Key")
    assert exc_info.value.key == "Missing_Key"


def test_resolve_follows_current_culture(texts, culture):
    assert texts.resolve("Order_Total_Header") == "Total"
    culture["current"] = Culture("de-AT")
    assert texts.resolve("Order_Total_Header") == "Gesamtsumme"


def test_resolve_accepts_text_resource_key(texts):
    assert texts.resolve(TextResourceKey.for_shortcuts("Quit")) == "Ctrl+Q"


def test_resolve_for_property(texts):
    assert texts.resolve_for_property("CustomerViewModel", "CustomerNameText") == "Customer name"
    assert texts.resolve_for_property("OrderViewModel", "TotalHeader") == "Total"


def test_underivable_property_surfaces_as_missing_resource(texts):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        texts.resolve_for_property("OrderViewModel", "Amount")
    assert not isinstance(exc_info.value, KeyDerivationError)


def test_resolve_for_property_missing_resource(texts):
    with pytest.raises(ResourceNotFoundError):
        texts.resolve_for_property("OrderViewModel", "DiscountHeader")


def test_resolve_for_class_or_instance(texts):
    assert texts.resolve_for(CustomerViewModel, "CustomerNameText") == "Customer name"
    assert texts.resolve_for(CustomerViewModel(), "CustomerNameText") == "Customer name"
    with pytest.raises(InvalidArgumentError):
        texts.resolve_for(None, "CustomerNameText")


def test_constructor_requires_store_and_culture(store):
    with pytest.raises(InvalidArgumentError):
        LocalizedTexts(None, lambda: Culture("en"))
    with pytest.raises(InvalidArgumentError):
        LocalizedTexts(store, None)
