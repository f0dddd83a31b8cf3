"""Core Layer - pure domain logic, no IO, no asyncio, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Time enters only through injected clocks; nothing here reads the wall clock itself

Design Decisions:
    - Functional core separated from the async shell (reducer + cache + coordinator are plain Python)
"""
