"""
Core capability contracts, numeric algorithms, and their configuration.

This package is pure computation: no I/O besides loading JSON configuration
on request, no shared mutable state.
"""
