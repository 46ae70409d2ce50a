"""STOMP protocol building blocks: frames, headers, errors, ids, messages and send options."""

__version__ = "0.1.0"