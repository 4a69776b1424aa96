from dataclasses import dataclass
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class SharedState:
    """Intrinsic state, shared between many cars"""
    brand: str
    model: str
    color: str

    def __post_init__(self):
        if not (self.brand and self.model and self.color):
            raise ValueError("Shared state needs brand, model and color")

    def __str__(self) -> str:
        return f"[ {self.brand} , {self.model} , {self.color} ]"


@dataclass(frozen=True)
class UniqueState:
    """Extrinsic state, passed in per call"""
    owner: str
    plates: str

    def __str__(self) -> str:
        return f"[ {self.owner} , {self.plates} ]"


class Flyweight:
    def __init__(self, shared_state: SharedState):
        self._shared_state = shared_state

    @property
    def shared_state(self) -> SharedState:
        return self._shared_state

    def operation(self, unique_state: UniqueState) -> str:
        message = (f"Flyweight: Displaying shared ({self._shared_state}) "
                   f"and unique ({unique_state}) state.")
        print(message)
        return message


class FlyweightFactory:
    """Creates flyweights on demand and hands out existing ones by key"""

    def __init__(self, initial_states: Iterable[SharedState] = ()):
        self._flyweights: Dict[str, Flyweight] = {}
        for state in initial_states:
            self._flyweights[self.get_key(state)] = Flyweight(state)

    @staticmethod
    def get_key(state: SharedState) -> str:
        return f"{state.brand}_{state.model}_{state.color}"

    def get_flyweight(self, shared_state: SharedState) -> Flyweight:
        key = self.get_key(shared_state)

        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(shared_state)
        else:
            print("FlyweightFactory: Reusing existing flyweight.")

        return self._flyweights[key]

    def get_keys(self) -> List[str]:
        return list(self._flyweights.keys())

    def list_flyweights(self) -> None:
        print(f"\nFlyweightFactory: I have {len(self._flyweights)} flyweights:")
        for key in self._flyweights:
            print(key)


def add_car_to_police_database(factory: FlyweightFactory, plates: str, owner: str,
                               brand: str, model: str, color: str) -> Flyweight:
    print("\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight(SharedState(brand, model, color))
    flyweight.operation(UniqueState(owner, plates))
    return flyweight


if __name__ == "__main__":
    factory = FlyweightFactory([
        SharedState("Chevrolet", "Camaro2018", "pink"),
        SharedState("Mercedes Benz", "C300", "black"),
        SharedState("Mercedes Benz", "C500", "red"),
        SharedState("BMW", "M5", "red"),
        SharedState("BMW", "X6", "white"),
    ])
    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    factory.list_flyweights()
