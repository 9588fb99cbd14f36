"""Adapters connecting the core to logging, tracing agents and sinks."""
