"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from questionit.core.interfaces.transport import ResponseLike, Transport

__all__ = ["ResponseLike", "Transport"]
