"""Builders and inspectors for morphological dictionary tables: lexeme maps, string and flexion tables, interchange tables and dump comparison."""

__version__ = "0.1.0"