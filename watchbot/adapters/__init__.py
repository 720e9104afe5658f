"""Adapters — Discord gateway and keep-alive web server."""
