"""Use-case layer for settings persistence.

Each module wraps a storage port call and turns I/O failures into
user-presentable ``UseCaseError`` instances.
"""
