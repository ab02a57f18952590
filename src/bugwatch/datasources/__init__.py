"""External data source integrations.

Each subdirectory is one data source:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs and constants
    └── {feature}.py      # Fetch/normalize functions

Sources return ``bugwatch.schemas`` models, never raw API payloads.
"""
