"""
Example 03: Additional Data and Proxy Types

This example demonstrates merging caller supplied values into mapped
targets and mapping lazily-loaded proxy instances.
"""

from dataclasses import dataclass

from pydantic import BaseModel

from custom_mapper import MapperConfig, MappingRegistry, ObjectMapper


@dataclass
class Product:
    sku: str
    name: str


class ProductView(BaseModel):
    sku: str
    name: str
    price: float = 0.0
    currency: str = "EUR"


class LazyProduct(Product):
    """Stand-in produced by a lazy-loading layer."""

    __proxy_base__ = Product


def main():
    registry = MappingRegistry()
    registry.register(Product, ProductView, lambda p, _: ProductView(sku=p.sku, name=p.name))

    mapper = ObjectMapper(registry)

    print("=== Additional Data ===\n")

    print("1. Dict of overrides:")
    view = mapper.map(Product("P-1", "Lamp"), ProductView, additional_data={"price": 19.9})
    print(f"   {view}\n")

    print("2. Record object as overrides:")

    @dataclass
    class Pricing:
        price: float
        currency: str

    view = mapper.map(Product("P-2", "Desk"), ProductView, additional_data=Pricing(120.0, "USD"))
    print(f"   {view}\n")

    print("3. Unknown fields skipped in lenient mode:")
    lenient = ObjectMapper(registry, MapperConfig(strict_additional_data=False))
    view = lenient.map(Product("P-3", "Chair"), ProductView, additional_data={"discount": 0.1})
    print(f"   {view}\n")

    print("4. Proxy instances use the mapping of their declared type:")
    view = mapper.map(LazyProduct("P-4", "Shelf"), ProductView)
    print(f"   {view}")


if __name__ == "__main__":
    main()
