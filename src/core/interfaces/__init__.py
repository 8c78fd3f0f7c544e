"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para el fetcher, el extractor de detalle y el
  gestor de modelos local.
- El servicio de catálogo depende de estas abstracciones; los tests las
  implementan con fakes en memoria.
"""
