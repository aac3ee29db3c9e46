"""
db/ - Database Layer
====================
Handles the ArangoDB client, database selection and schema bootstrap.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
