from mediator_pattern import Component1, Component2, ConcreteMediator


class TestMediator:
    def test_event_a_triggers_c(self, capsys):
        c1, c2 = Component1(), Component2()
        ConcreteMediator(c1, c2)
        c1.do_a()
        assert capsys.readouterr().out.splitlines() == [
            "Component 1 does A.",
            "Mediator reacts on A and triggers following operations:",
            "Component 2 does C.",
        ]

    def test_event_d_triggers_b_and_c(self, capsys):
        c1, c2 = Component1(), Component2()
        ConcreteMediator(c1, c2)
        c2.do_d()
        assert capsys.readouterr().out.splitlines() == [
            "Component 2 does D.",
            "Mediator reacts on D and triggers following operations:",
            "Component 1 does B.",
            "Component 2 does C.",
        ]

    def test_mediator_registers_itself(self):
        c1, c2 = Component1(), Component2()
        mediator = ConcreteMediator(c1, c2)
        assert c1.mediator is mediator
        assert c2.mediator is mediator

    def test_component_without_mediator(self, capsys):
        Component1().do_b()
        assert capsys.readouterr().out == "Component 1 does B.\n"
