"""
Service layer abstraction.

Services sit between the HTTP handlers and the store, so handlers
only deal with schemas and never touch SQL.
"""
