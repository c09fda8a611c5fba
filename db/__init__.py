"""
db/ - Database Layer
====================
Connection provider, statement builder, cleanup helpers and schema bootstrap.
This layer is the lowest in the architecture and knows nothing about employees.
"""
