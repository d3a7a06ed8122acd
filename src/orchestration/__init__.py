"""
Deferred (asynchronous) computations.

Coroutines that complete after a delay, plus helpers to schedule them as
tasks on the running event loop.
"""
