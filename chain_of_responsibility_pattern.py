from abc import ABC, abstractmethod
from typing import Iterable, Optional


class Handler(ABC):
    @abstractmethod
    def set_next(self, handler: 'Handler') -> 'Handler':
        pass

    @abstractmethod
    def handle(self, request: str) -> Optional[str]:
        pass


class AbstractHandler(Handler):
    """Default handling passes the request down the chain"""

    def __init__(self):
        self._next_handler: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        self._next_handler = handler
        # Returning the handler allows monkey.set_next(squirrel).set_next(dog)
        return handler

    def handle(self, request: str) -> Optional[str]:
        if self._next_handler is not None:
            return self._next_handler.handle(request)
        return None


class FoodHandler(AbstractHandler):
    """Eats one kind of food, passes everything else on"""

    name = ""
    food = ""

    def handle(self, request: str) -> Optional[str]:
        if request == self.food:
            return f"{self.name}: I'll eat the {request}."
        return super().handle(request)


class MonkeyHandler(FoodHandler):
    name = "Monkey"
    food = "Banana"


class SquirrelHandler(FoodHandler):
    name = "Squirrel"
    food = "Nut"


class DogHandler(FoodHandler):
    name = "Dog"
    food = "MeatBall"


def client_code(handler: Handler,
                food: Iterable[str] = ("Nut", "Banana", "Cup of coffee")) -> None:
    for item in food:
        print(f"Client: Who wants a {item}?")
        result = handler.handle(item)
        if result:
            print(f"  {result}")
        else:
            print(f"  {item} was left untouched.")


if __name__ == "__main__":
    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()
    monkey.set_next(squirrel).set_next(dog)

    print("Chain: Monkey > Squirrel > Dog\n")
    client_code(monkey)
    print()

    print("Subchain: Squirrel > Dog\n")
    client_code(squirrel)
