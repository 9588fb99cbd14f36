"""Sink adapters implementing LogSinkPort."""

from loglink.adapters.sinks.in_memory import InMemorySink

__all__ = ["InMemorySink"]
