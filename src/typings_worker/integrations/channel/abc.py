"""Abstract message channel to the parent process."""

from abc import ABC, abstractmethod

from typings_worker.models.messages import Request, Response


class Channel(ABC):
    """Bidirectional, ordered message channel to the parent process."""

    @abstractmethod
    def receive(self) -> Request | None:
        """Block until the next request arrives.

        Returns:
            The next request, or None once the parent has disconnected

        Raises:
            ProtocolError: If the parent sent a message that is not a known request
        """
        ...

    @abstractmethod
    def send(self, response: Response) -> None:
        """Deliver a response to the parent.

        Raises:
            ChannelClosedError: If the parent has disconnected
        """
        ...
