"""Parent <-> worker message channel integration."""

from typings_worker.integrations.channel.abc import Channel
from typings_worker.integrations.channel.fake import FakeChannel
from typings_worker.integrations.channel.real import StdioChannel

__all__ = ["Channel", "FakeChannel", "StdioChannel"]
