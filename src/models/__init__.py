"""
Domain classes with a small capability hierarchy.

Defines a structural `Describable` interface and the Vehicle/Car classes
that implement it.
"""
