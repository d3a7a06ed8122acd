"""
Record types and schema enforcement.

Defines the immutable records (rated items, products) and the matching
DataFrame column contracts, with validation that fails fast on malformed input.
"""
