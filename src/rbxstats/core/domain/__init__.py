"""Modelos y entidades del dominio.

Por qué:
- Aquí vive la configuración inmutable del cliente (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
