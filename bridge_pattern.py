from abc import ABC, abstractmethod


class Implementation(ABC):
    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A.\n"


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B.\n"


class Abstraction:
    """Control side of the bridge, delegating the real work to an Implementation"""

    def __init__(self, implementation: Implementation):
        self._implementation = implementation

    @property
    def implementation(self) -> Implementation:
        return self._implementation

    def operation(self) -> str:
        return ("Abstraction: Base operation with:\n"
                + self._implementation.operation_implementation())


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return ("ExtendedAbstraction: Extended operation with:\n"
                + self._implementation.operation_implementation())


def client_code(abstraction: Abstraction) -> None:
    print(abstraction.operation(), end="")


if __name__ == "__main__":
    implementation = ConcreteImplementationA()
    abstraction = Abstraction(implementation)
    client_code(abstraction)
    print()

    implementation = ConcreteImplementationB()
    abstraction = ExtendedAbstraction(implementation)
    client_code(abstraction)
