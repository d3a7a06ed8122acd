"""
Vectorized, DataFrame-based counterparts of the sequence helpers.

Filters and max-finders over tabular rated-item and product data.
"""
