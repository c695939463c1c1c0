"""JSON-lines channel over the worker's standard streams."""

import json
import sys
from typing import TextIO

from typings_worker.errors import ChannelClosedError
from typings_worker.integrations.channel.abc import Channel
from typings_worker.models.messages import Request, Response, parse_request


class StdioChannel(Channel):
    """Reads one JSON request per line and writes one JSON response per line.

    End of input on the reading side means the parent has exited.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self._reader = reader if reader is not None else sys.stdin
        self._writer = writer if writer is not None else sys.stdout

    def receive(self) -> Request | None:
        while True:
            line = self._reader.readline()
            if not line:
                return None
            line = line.strip()
            if line:
                return parse_request(line)

    def send(self, response: Response) -> None:
        try:
            self._writer.write(json.dumps(response.to_wire()) + "\n")
            self._writer.flush()
        except BrokenPipeError as e:
            raise ChannelClosedError("Parent process closed the response channel") from e
