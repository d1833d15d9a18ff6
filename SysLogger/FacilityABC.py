from abc import ABC, abstractmethod


class OpenError(Exception):
    """
    Raised when the system log facility cannot be opened.
    """


class FacilityABC(ABC):
    """
    Handle to a system log facility.
    """

    @abstractmethod
    def set_mask(self, priority: int) -> None:
        """
        Restricts the handle to priorities at or above the given one.
        """
        pass

    @abstractmethod
    def write(self, priority: int, text: str) -> None:
        """
        Sends one message at the given priority.
        The text is a format string, a literal % arrives escaped as %%.
        """
        pass

    def __str__(self) -> str:
        return "FacilityABC"

    def __repr__(self) -> str:
        return "FacilityABC"
