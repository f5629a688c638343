"""OpenAPI-driven mock responses and in-memory state stores for Autodesk Platform Services APIs."""

__version__ = "0.2.0"