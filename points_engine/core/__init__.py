"""
Core domain types, errors and logging shared by the conversion and
simulation layers.
"""
