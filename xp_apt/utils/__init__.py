"""
Helpers for the apt.dat reader: unit conversion, name handling, filters
and the collaborators the airport session depends on.
"""
