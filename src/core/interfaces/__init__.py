"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan los adaptadores concretos, de modo que el
Core dependa de abstracciones y no del sistema operativo.
"""
