"""Use-case layer for list transfer workflows.

Each module coordinates domain collections and selection slots without
touching widgets, preserving MVVM boundaries.
"""
