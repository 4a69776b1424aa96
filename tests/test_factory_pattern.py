from factory_pattern import ConcreteCreator1, ConcreteCreator2, ConcreteProduct2, client_code


class TestFactoryMethod:
    def test_creator_one(self):
        assert ConcreteCreator1().some_operation() == (
            "Creator: The same creator's code has just worked with "
            "{Result of the ConcreteProduct1}"
        )

    def test_factory_method_product_type(self):
        assert isinstance(ConcreteCreator2().factory_method(), ConcreteProduct2)

    def test_client_code(self, capsys):
        client_code(ConcreteCreator2())
        out = capsys.readouterr().out
        assert "I'm not aware of the creator's class" in out
        assert "{Result of the ConcreteProduct2}" in out
