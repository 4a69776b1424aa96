from abc import ABC, abstractmethod
from typing import Iterable, List


class Component(ABC):
    @abstractmethod
    def accept(self, visitor: 'Visitor') -> str:
        pass


class ConcreteComponentA(Component):
    def accept(self, visitor: 'Visitor') -> str:
        return visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: 'Visitor') -> str:
        return visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class Visitor(ABC):
    @abstractmethod
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        pass

    @abstractmethod
    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        pass


class ConcreteVisitor1(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor1"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor1"


class ConcreteVisitor2(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor2"

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor2"


def client_code(components: Iterable[Component], visitor: Visitor) -> List[str]:
    results = []
    for component in components:
        result = component.accept(visitor)
        print(result)
        results.append(result)
    return results


if __name__ == "__main__":
    components = [ConcreteComponentA(), ConcreteComponentB()]

    print("The client code works with all visitors via the base Visitor interface:")
    client_code(components, ConcreteVisitor1())
    print()

    print("It allows the same client code to work with different types of visitors:")
    client_code(components, ConcreteVisitor2())
