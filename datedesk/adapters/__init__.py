"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports. The only I/O this
    application performs is reading and writing the user settings file.

Call context:
    Imported by ``datedesk.app.main`` for runtime wiring and by tests.
"""
