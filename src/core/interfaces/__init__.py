"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que cumplen los modelos del dominio.
- La CLI depende de estos contratos, no de la jerarquía concreta.
"""
