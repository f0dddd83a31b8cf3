"""Services Layer - async orchestration around the pure core.

Invariants:
    - All fetch IO happens here, behind the WidgetDataSource protocol
    - State changes go through WidgetOrchestrator.dispatch only
"""
