from .ABC_client import ABCClient

__all__ = [
    "ABCClient",
]
