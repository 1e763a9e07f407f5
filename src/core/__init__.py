"""
Core mathematical primitives and error taxonomy.

This module contains the foundational building blocks that are independent
of the grid's coordinate systems and of the h3 library.
"""
