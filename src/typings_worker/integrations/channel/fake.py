"""In-memory fake channel for testing."""

from typings_worker.errors import ChannelClosedError
from typings_worker.integrations.channel.abc import Channel
from typings_worker.models.messages import Request, Response, parse_request


class FakeChannel(Channel):
    """Serves pre-configured messages and records sent responses.

    Messages may be request models or raw JSON strings; raw strings go through
    the same decoding as the real channel. After the last message receive()
    returns None, simulating a parent disconnect.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        messages: list[Request | str] | None = None,
        closed: bool = False,
    ) -> None:
        """Create FakeChannel.

        Args:
            messages: Messages returned by receive(), in order
            closed: If True, send() raises ChannelClosedError
        """
        self._messages = list(messages or [])
        self._closed = closed
        self._sent: list[Response] = []

    @property
    def sent(self) -> list[Response]:
        """Responses sent so far, in order."""
        return self._sent.copy()

    def receive(self) -> Request | None:
        if not self._messages:
            return None
        message = self._messages.pop(0)
        if isinstance(message, str):
            return parse_request(message)
        return message

    def send(self, response: Response) -> None:
        if self._closed:
            raise ChannelClosedError("Parent process closed the response channel")
        self._sent.append(response)
