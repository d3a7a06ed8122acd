"""
Generic utility functions shared across modules.

Includes string and value helpers, sequence helpers, day/delay abstractions,
logging setup, and error classes.
"""
