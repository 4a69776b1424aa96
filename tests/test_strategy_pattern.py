from strategy_pattern import ConcreteStrategyA, ConcreteStrategyB, Context


class TestStrategy:
    def test_ascending(self):
        assert Context(ConcreteStrategyA()).do_some_business_logic() == "abcde"

    def test_descending_after_swap(self):
        context = Context(ConcreteStrategyA())
        context.strategy = ConcreteStrategyB()
        assert context.do_some_business_logic() == "edcba"

    def test_custom_data(self):
        assert Context(ConcreteStrategyB(), data="bca").do_some_business_logic() == "cba"

    def test_no_strategy(self, capsys):
        assert Context().do_some_business_logic() is None
        assert capsys.readouterr().out == "Context: strategy isn't set\n"
