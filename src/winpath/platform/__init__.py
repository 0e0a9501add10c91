"""Platform services: logging and Windows operating system adapters."""
