from creational_builder.product import Product


def test_describe_joins_parts_in_order() -> None:
    product = Product()
    product.add_part("PartA1")
    product.add_part("PartC1")
    product.add_part("PartA1")
    assert product.describe() == "PartA1, PartC1, PartA1"


def test_describe_empty_product() -> None:
    assert Product().describe() == ""


def test_describe_is_idempotent_and_non_mutating() -> None:
    product = Product(parts=["x", "y"])
    first = product.describe()
    assert product.describe() == first
    assert product.parts == ["x", "y"]


def test_list_parts_prefixes_description() -> None:
    product = Product(parts=["PartA1", "PartB1"])
    assert product.list_parts() == "Product parts: PartA1, PartB1"


def test_len_and_iteration() -> None:
    product = Product(parts=["a", "b"])
    assert len(product) == 2
    assert list(product) == ["a", "b"]
