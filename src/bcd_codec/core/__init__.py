"""
Core codec primitives and domain models.

This module contains the foundational building blocks that are independent
of any record reader or writer.
"""
