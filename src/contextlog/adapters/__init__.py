"""Adapters – entry-point wrappers that bind a logger scope per invocation."""
from contextlog.adapters.asgi import LoggerScopeMiddleware
from contextlog.adapters.lambda_handler import QUEUE_EVENT_SOURCE, queue_message_ids, with_logger_lambda

__all__ = ["QUEUE_EVENT_SOURCE", "LoggerScopeMiddleware", "queue_message_ids", "with_logger_lambda"]
