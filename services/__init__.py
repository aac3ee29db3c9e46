"""
services/ - Business Logic Layer
================================
Orchestrates repositories and writes query results to the console.
"""
