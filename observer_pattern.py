from abc import ABC, abstractmethod
from itertools import count
from typing import List


class IObserver(ABC):
    @abstractmethod
    def update(self, message_from_subject: str) -> None:
        pass


class ISubject(ABC):
    @abstractmethod
    def attach(self, observer: IObserver) -> None:
        pass

    @abstractmethod
    def detach(self, observer: IObserver) -> None:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass


class Subject(ISubject):
    """Keeps a list of observers and pushes its current message to them"""

    def __init__(self):
        self._observers: List[IObserver] = []
        self._message = ""

    @property
    def message(self) -> str:
        return self._message

    def attach(self, observer: IObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: IObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        self.how_many_observers()
        # Observers may detach while being notified
        for observer in list(self._observers):
            observer.update(self._message)

    def create_message(self, message: str = "Empty") -> None:
        self._message = message
        self.notify()

    def how_many_observers(self) -> int:
        total = len(self._observers)
        print(f"There are {total} observers in the list.")
        return total

    def some_business_logic(self) -> None:
        self._message = "change message message"
        self.notify()
        print("I'm about to do some thing important")


class Observer(IObserver):
    _counter = count(1)

    def __init__(self, subject: Subject):
        self._subject = subject
        self._message_from_subject = ""
        self._number = next(Observer._counter)
        self._subject.attach(self)
        print(f'Hi, I\'m the Observer "{self._number}".')

    @property
    def number(self) -> int:
        return self._number

    @property
    def message_from_subject(self) -> str:
        return self._message_from_subject

    def update(self, message_from_subject: str) -> None:
        self._message_from_subject = message_from_subject
        self.print_info()

    def remove_me_from_the_list(self) -> None:
        self._subject.detach(self)
        print(f'Observer "{self._number}" removed from the list.')

    def print_info(self) -> None:
        print(f'Observer "{self._number}": a new message is available --> '
              f'{self._message_from_subject}')


def client_code() -> None:
    subject = Subject()
    observer1 = Observer(subject)
    observer2 = Observer(subject)
    observer3 = Observer(subject)

    subject.create_message("Hello World! :D")
    observer3.remove_me_from_the_list()

    subject.create_message("The weather is hot today! :p")
    observer4 = Observer(subject)

    observer2.remove_me_from_the_list()
    observer5 = Observer(subject)

    subject.create_message("My new car is great! ;)")
    observer5.remove_me_from_the_list()

    observer4.remove_me_from_the_list()
    observer1.remove_me_from_the_list()


if __name__ == "__main__":
    client_code()
