from decorator_pattern import (
    ConcreteComponent,
    ConcreteDecoratorA,
    ConcreteDecoratorB,
    Decorator,
    client_code,
)


class TestDecorator:
    def test_plain_component(self):
        assert ConcreteComponent().operation() == "ConcreteComponent"

    def test_base_decorator_forwards(self):
        assert Decorator(ConcreteComponent()).operation() == "ConcreteComponent"

    def test_stacked_decorators(self):
        decorated = ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent()))
        assert decorated.operation() == "ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))"

    def test_client_code(self, capsys):
        client_code(ConcreteDecoratorA(ConcreteComponent()))
        assert capsys.readouterr().out == "RESULT: ConcreteDecoratorA(ConcreteComponent)\n"
