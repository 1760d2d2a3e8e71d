"""Adaptadores concretos (httpx, exportación JSON)."""
