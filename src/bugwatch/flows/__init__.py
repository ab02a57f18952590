"""
Prefect flows.

Flows:
- refresh: fetch current weather, predict insect activity, cache both

Usage (local):
    python -m bugwatch.flows.refresh

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    python -m bugwatch.flows.refresh
"""
