"""
Visores interactivos de terminal.
"""
