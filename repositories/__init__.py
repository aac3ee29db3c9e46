"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all AQL queries for a specific collection.
Repositories receive raw documents from the database and return domain model objects.
"""
