"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los mensajes de la API (Pydantic v2) y el codec de timestamps.
- El dominio no conoce HTTP ni la CLI: solo la forma de los datos.
"""
