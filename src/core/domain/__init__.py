"""Modelos del dominio.

Estructuras de datos puras e inmutables (Pydantic v2). El dominio no conoce
la CLI ni el sistema de ficheros.
"""
