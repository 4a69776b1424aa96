from abc import ABC, abstractmethod
from datetime import datetime
from typing import List


class Subject(ABC):
    @abstractmethod
    def request(self) -> None:
        pass


class RealSubject(Subject):
    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    """Guards a RealSubject: checks access first, records each request after"""

    def __init__(self, real_subject: RealSubject, allowed: bool = True):
        self._real_subject = real_subject
        self._allowed = allowed
        self._access_log: List[datetime] = []

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return self._allowed

    def log_access(self) -> None:
        print("Proxy: Logging the time of request.")
        self._access_log.append(datetime.now())

    def get_access_log(self) -> List[datetime]:
        return list(self._access_log)


def client_code(subject: Subject) -> None:
    subject.request()


if __name__ == "__main__":
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client_code(real_subject)
    print()

    print("Client: Executing the same client code with a proxy:")
    proxy = Proxy(real_subject)
    client_code(proxy)
