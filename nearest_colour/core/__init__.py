"""nearest_colour.core — Foundation layer.

Contains the colour types, the hex/RGBA codec and the error taxonomy.
This module has NO dependencies on nearest_colour.matcher.
Only stdlib and numpy are allowed here.
"""
