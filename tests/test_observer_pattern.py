from observer_pattern import Observer, Subject


class TestObserver:
    def test_attached_observers_receive_message(self):
        subject = Subject()
        first = Observer(subject)
        second = Observer(subject)
        subject.create_message("Hello World! :D")
        assert first.message_from_subject == "Hello World! :D"
        assert second.message_from_subject == "Hello World! :D"

    def test_removed_observer_is_not_notified(self):
        subject = Subject()
        observer = Observer(subject)
        observer.remove_me_from_the_list()
        subject.create_message("The weather is hot today! :p")
        assert observer.message_from_subject == ""
        assert subject.how_many_observers() == 0

    def test_observer_numbers_increase(self):
        subject = Subject()
        first = Observer(subject)
        second = Observer(subject)
        assert second.number == first.number + 1

    def test_attach_is_idempotent(self):
        subject = Subject()
        observer = Observer(subject)
        subject.attach(observer)
        assert subject.how_many_observers() == 1

    def test_some_business_logic(self, capsys):
        subject = Subject()
        observer = Observer(subject)
        subject.some_business_logic()
        assert observer.message_from_subject == "change message message"
        out = capsys.readouterr().out
        assert "There are 1 observers in the list." in out
        assert "I'm about to do some thing important" in out
