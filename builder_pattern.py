from abc import ABC, abstractmethod
from typing import List, Optional


class Product1:
    def __init__(self):
        self.parts: List[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> str:
        return f"Product parts: {', '.join(self.parts)}"


class Builder(ABC):
    @abstractmethod
    def produce_part_a(self) -> None:
        pass

    @abstractmethod
    def produce_part_b(self) -> None:
        pass

    @abstractmethod
    def produce_part_c(self) -> None:
        pass


class ConcreteBuilder1(Builder):
    """
    Builds Product1 step by step.

    Reading `product` hands over the finished object and starts a fresh one,
    so the same builder can be reused for the next product.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        product = self._product
        self.reset()
        return product

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")


class Director:
    """Knows the build recipes, not the concrete builder"""

    def __init__(self):
        self._builder: Optional[Builder] = None

    @property
    def builder(self) -> Optional[Builder]:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def _require_builder(self) -> Builder:
        if self._builder is None:
            raise ValueError("Director has no builder set")
        return self._builder

    def build_minimal_viable_product(self) -> None:
        self._require_builder().produce_part_a()

    def build_full_featured_product(self) -> None:
        builder = self._require_builder()
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()


def client_code(director: Director) -> None:
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product:")
    director.build_minimal_viable_product()
    print(builder.product.list_parts())
    print()

    print("Standard full featured product:")
    director.build_full_featured_product()
    print(builder.product.list_parts())
    print()

    print("Custom product:")
    builder.produce_part_a()
    builder.produce_part_c()
    print(builder.product.list_parts())


if __name__ == "__main__":
    client_code(Director())
