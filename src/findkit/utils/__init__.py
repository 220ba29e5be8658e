"""Shared helpers: typed errors, leveled log handles and sequence utilities."""
