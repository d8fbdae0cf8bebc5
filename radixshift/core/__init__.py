"""
Core math primitives, domain models, and contracts.

This module contains the foundational building blocks of the conversion
engine that are independent of the batch pipeline.
"""
