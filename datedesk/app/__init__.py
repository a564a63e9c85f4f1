"""Application composition layer for the Tkinter GUI.

``main`` wires the main window, view models, storage adapter and use cases
into the runnable desktop tool without placing date logic in views.
"""
