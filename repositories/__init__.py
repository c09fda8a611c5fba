"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories map database rows to domain model objects and report failures
as DAOError with a tagged ErrorKind.
"""
