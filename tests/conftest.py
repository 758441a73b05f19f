"""Shared fixtures."""

import pytest

from shopcart import CartFactory, Product, ShoppingCart


@pytest.fixture
def milk() -> Product:
    return Product(id="1001", name="Milk 1L")


@pytest.fixture
def bread() -> Product:
    return Product(id="2002", name="Bread")


@pytest.fixture
def coffee() -> Product:
    return Product(id="3003", name="Coffee 250g", description="Ground")


@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()


@pytest.fixture
def factory() -> CartFactory:
    return CartFactory()
