"""Application tests for the RemoveStocks command."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from stockroom.exceptions import ProductNotFound
from stockroom.product.product import Product
from stockroom.product.registration import RegisterProduct
from stockroom.stock.add_stocks import AddStocks
from stockroom.stock.remove_stocks import RemoveStocks


def _register_product(product_id=7, quantity_in_stock=10):
    command = RegisterProduct(product_id=product_id, name="Ceramic Mug", quantity_in_stock=quantity_in_stock)
    return current_domain.process(command, asynchronous=False)


def _stock_of(product_id):
    return current_domain.repository_for(Product).get(product_id).quantity_in_stock


class TestRemoveStocksCommand:
    def test_remove_returns_new_stock_level(self):
        _register_product(quantity_in_stock=10)
        result = current_domain.process(RemoveStocks(product_id=7, quantity=4), asynchronous=False)
        assert result.quantity_in_stock == 6
        assert _stock_of(7) == 6

    def test_remove_everything(self):
        _register_product(quantity_in_stock=10)
        result = current_domain.process(RemoveStocks(product_id=7, quantity=10), asynchronous=False)
        assert result.quantity_in_stock == 0

    def test_remove_more_than_held_rejected(self):
        _register_product(quantity_in_stock=10)
        with pytest.raises(ValidationError) as exc_info:
            current_domain.process(RemoveStocks(product_id=7, quantity=11), asynchronous=False)
        assert "quantity" in exc_info.value.messages
        assert _stock_of(7) == 10

    def test_unknown_product_raises_not_found(self):
        with pytest.raises(ProductNotFound):
            current_domain.process(RemoveStocks(product_id=999, quantity=1), asynchronous=False)

    def test_add_then_remove_round_trip(self):
        _register_product(quantity_in_stock=0)
        current_domain.process(AddStocks(product_id=7, quantity=8), asynchronous=False)
        current_domain.process(RemoveStocks(product_id=7, quantity=3), asynchronous=False)
        assert _stock_of(7) == 5
