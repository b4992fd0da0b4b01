"""Writer – the primary log sink."""
from contextlog.writer.protocol import LogWriter
from contextlog.writer.structlog_writer import StructlogWriter

__all__ = ["LogWriter", "StructlogWriter"]
