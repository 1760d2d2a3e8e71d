"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 y dataclasses).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""
