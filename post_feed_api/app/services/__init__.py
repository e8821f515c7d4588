"""
Service layer abstraction.

Each service encapsulates the operations of a domain.  Services receive
their storage explicitly so API handlers never reach for globals.
"""
