import pytest

from chain_of_responsibility_pattern import DogHandler, MonkeyHandler, SquirrelHandler, client_code


@pytest.fixture
def chain():
    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()
    monkey.set_next(squirrel).set_next(dog)
    return monkey, squirrel, dog


class TestChain:
    def test_set_next_returns_handler(self):
        squirrel = SquirrelHandler()
        assert MonkeyHandler().set_next(squirrel) is squirrel

    def test_each_handler_eats_its_food(self, chain):
        monkey, _, _ = chain
        assert monkey.handle("Banana") == "Monkey: I'll eat the Banana."
        assert monkey.handle("Nut") == "Squirrel: I'll eat the Nut."
        assert monkey.handle("MeatBall") == "Dog: I'll eat the MeatBall."

    def test_unhandled_request(self, chain):
        monkey, _, _ = chain
        assert monkey.handle("Cup of coffee") is None

    def test_subchain_skips_monkey(self, chain, capsys):
        _, squirrel, _ = chain
        assert squirrel.handle("Banana") is None
        client_code(squirrel)
        out = capsys.readouterr().out
        assert "Banana was left untouched." in out
        assert "Squirrel: I'll eat the Nut." in out
