"""Tradutor Riofer - desktop client for the MyMemory translation API."""

__version__ = "0.1.0"
