"""ViewModel package for UI state and command surfaces.

Call context:
    ``shuttle/app/main.py`` builds the concrete view model and binds view
    callbacks to its selection API and commands.

Dependencies:
    Domain collections and the transfer use case only. Widgets stay in
    ``shuttle.app.views``.
"""
