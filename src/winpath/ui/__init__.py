"""User interfaces for winpath."""
