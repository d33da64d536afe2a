"""Adapters: pure I/O (HTTP transport, XML parsing)."""
