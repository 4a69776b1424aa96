from threading import Lock, Thread
from typing import List, Optional
import time


class Singleton:
    """
    Thread-safe singleton holding a single value.

    The first caller of get_instance decides the value; later callers get
    the same object back whatever value they pass.
    """

    _instance: Optional['Singleton'] = None
    _lock = Lock()

    def __init__(self, value: str):
        self._value = value

    @classmethod
    def get_instance(cls, value: str) -> 'Singleton':
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(value)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None

    @property
    def value(self) -> str:
        return self._value

    def some_business_logic(self) -> str:
        return f"Singleton({self._value}) doing business logic"


def _thread_body(value: str, results: List[str], delay: float) -> None:
    time.sleep(delay)
    singleton = Singleton.get_instance(value)
    results.append(singleton.value)
    print(singleton.value)


def race_threads(values: List[str], delay: float = 1.0) -> List[str]:
    """Start one thread per value at once; returns what each thread saw"""
    results: List[str] = []
    threads = [Thread(target=_thread_body, args=(value, results, delay))
               for value in values]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    return results


if __name__ == "__main__":
    print("If you see the same value, then singleton was reused (yay!)\n"
          "If you see different values, then 2 singletons were created (booo!!)\n\n"
          "RESULT:")
    race_threads(["FOO", "BAR"])
