"""
Core domain models.

This module contains the building blocks that are independent of the
storage medium: the transaction log vocabulary, totals and the report model.
"""
