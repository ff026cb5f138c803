"""Swagger Doc - post-process API specifications and emit a RapiDoc viewer."""

__version__ = "2.3.5"
