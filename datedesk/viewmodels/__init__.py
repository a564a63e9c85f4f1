"""ViewModel package for UI state and command surfaces.

Call context:
    ``datedesk/app/main.py`` and ``datedesk/web_ui/main.py`` import concrete
    viewmodels from this package to bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types only. Settings persistence
    remains in adapters and use cases.
"""
