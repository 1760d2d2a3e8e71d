"""Servicios del Core: construcción de peticiones y normalización de respuestas."""
