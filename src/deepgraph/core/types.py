"""Core type definitions for deepgraph."""

type Fresh[T] = T
"""Type alias indicating a value shares no container identity with any input.

When you see `Fresh[T]` in a return type, every list, set, dict and Record
reachable from the returned value was allocated by the call. Mutating it never
affects the arguments.
"""
