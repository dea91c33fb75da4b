from creational_builder.builders import ConcreteBuilder2
from creational_builder.client import run_client


def test_run_client_three_modes() -> None:
    results = run_client()
    assert [(title, product.describe()) for title, product in results] == [
        ("Standard basic product", "PartA1"),
        ("Standard full featured product", "PartA1, PartB1, PartC1"),
        ("Custom product", "PartA1, PartC1"),
    ]


def test_run_client_products_are_distinct() -> None:
    products = [product for _, product in run_client()]
    assert len({id(p) for p in products}) == 3


def test_run_client_with_other_variant() -> None:
    results = run_client(ConcreteBuilder2())
    assert results[-1][1].describe() == "PartA2, PartC2"
