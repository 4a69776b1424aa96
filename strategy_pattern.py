from abc import ABC, abstractmethod
from typing import Optional


class Strategy(ABC):
    @abstractmethod
    def do_algorithm(self, data: str) -> str:
        pass


class ConcreteStrategyA(Strategy):
    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data))


class ConcreteStrategyB(Strategy):
    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data, reverse=True))


class Context:
    """Runs its business logic with whichever strategy is plugged in"""

    DEFAULT_DATA = "aecbd"

    def __init__(self, strategy: Optional[Strategy] = None, data: str = DEFAULT_DATA):
        self._strategy = strategy
        self._data = data

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Optional[Strategy]) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> Optional[str]:
        if self._strategy is None:
            print("Context: strategy isn't set")
            return None

        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm(self._data)
        print(result)
        return result


def client_code():
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic()
    print()

    print("Client: Strategy is set to reverse sorting.")
    context.strategy = ConcreteStrategyB()
    context.do_some_business_logic()


if __name__ == "__main__":
    client_code()
