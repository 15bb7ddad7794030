"""
db/ - Database Layer
====================
Handles PostgreSQL connections and schema initialization.
This layer is the lowest in the architecture and depends only on config and logging.
"""
