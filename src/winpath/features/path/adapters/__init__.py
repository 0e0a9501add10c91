"""Adapters implementing path feature ports."""

from .filesystem import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]
