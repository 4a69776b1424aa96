from bridge_pattern import (
    Abstraction,
    ConcreteImplementationA,
    ConcreteImplementationB,
    ExtendedAbstraction,
    client_code,
)


class TestBridge:
    def test_base_abstraction(self):
        abstraction = Abstraction(ConcreteImplementationA())
        assert abstraction.operation() == (
            "Abstraction: Base operation with:\n"
            "ConcreteImplementationA: Here's the result on the platform A.\n"
        )

    def test_extended_abstraction_swaps_implementation(self):
        abstraction = ExtendedAbstraction(ConcreteImplementationB())
        assert abstraction.operation().startswith("ExtendedAbstraction: Extended operation with:\n")
        assert abstraction.operation().endswith("platform B.\n")

    def test_client_code(self, capsys):
        client_code(Abstraction(ConcreteImplementationB()))
        assert "platform B" in capsys.readouterr().out
