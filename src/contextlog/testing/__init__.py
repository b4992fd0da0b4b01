"""Testing support – fakes for the writer and chat client.

Build a fully in-memory logger in your tests::

    writer, chat = CapturingWriter(), InMemoryChatClient()
    logger = Logger(config, environment="staging", writer=writer, chat_client=chat)
"""

from contextlog.testing.fakes import CapturingWriter, InMemoryChatClient, WrittenRecord

__all__ = ["CapturingWriter", "InMemoryChatClient", "WrittenRecord"]
