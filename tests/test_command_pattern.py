from command_pattern import ComplexCommand, Invoker, Receiver, SimpleCommand


class TestCommand:
    def test_invoker_runs_both_commands(self, capsys):
        invoker = Invoker()
        invoker.set_on_start(SimpleCommand("Say Hi!"))
        invoker.set_on_finish(ComplexCommand(Receiver(), "Send email", "Save report"))
        invoker.do_something_important()
        assert capsys.readouterr().out.splitlines() == [
            "Invoker: Does anybody want something done before I begin?",
            "SimpleCommand: See, I can do simple things like printing (Say Hi!)",
            "Invoker: ...doing something really important...",
            "Invoker: Does anybody want something done after I finish?",
            "ComplexCommand: Complex stuff should be done by a receiver object.",
            "Receiver: Working on (Send email.)",
            "Receiver: Also working on (Save report.)",
        ]

    def test_invoker_without_commands(self, capsys):
        Invoker().do_something_important()
        assert len(capsys.readouterr().out.splitlines()) == 3
