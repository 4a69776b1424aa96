from visitor_pattern import ConcreteComponentA, ConcreteComponentB, ConcreteVisitor1, ConcreteVisitor2, client_code


class TestVisitor:
    def test_visitor_one(self):
        components = [ConcreteComponentA(), ConcreteComponentB()]
        assert client_code(components, ConcreteVisitor1()) == ["A + ConcreteVisitor1", "B + ConcreteVisitor1"]

    def test_visitor_two(self, capsys):
        client_code([ConcreteComponentB()], ConcreteVisitor2())
        assert capsys.readouterr().out == "B + ConcreteVisitor2\n"
