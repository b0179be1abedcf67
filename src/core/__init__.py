"""
Core domain models, money primitives, contracts and the catalog.

This module contains the foundational building blocks that are independent
of any rendering or input layer.
"""
