"""
Core domain models, errors, and contracts.

This module contains the foundational building blocks for exact ingredient
quantities that are independent of external systems (HTTP, storage, etc.).
"""
