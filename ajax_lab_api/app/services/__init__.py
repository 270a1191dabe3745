"""
Service layer.

Services hold the business logic and own their state; handlers only
parse requests and shape responses.  The calculation history is
stored in PostgreSQL, likes and comments live in process memory.
"""
