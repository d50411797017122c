"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Los grupos de endpoints dependen del contrato, no de httpx.
"""
