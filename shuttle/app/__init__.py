"""Application composition layer for the Tkinter GUI.

Modules here wire views and the transfer view model into a runnable desktop
window without placing list logic in views.
"""
