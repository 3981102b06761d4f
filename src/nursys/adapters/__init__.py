"""Adaptadores de I/O: HTTP (httpx) y exportación."""
