"""OctoCAT Supply FastAPI application.

Serves the supplier and product endpoints over the supply domain.
PROTEAN_ENV selects the domain configuration overlay (``production``
persists to SQLite, anything else keeps data in memory).

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from supply.api.app import create_app
from supply.domain import supply

# Domains are initialized at module level so uvicorn workers share them.
supply.init()

app = create_app(supply)
