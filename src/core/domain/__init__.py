"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las entidades validadas (Pydantic v2), sus errores y validadores.
- El dominio no conoce la consola ni la configuración: solo conceptos del problema.
"""
