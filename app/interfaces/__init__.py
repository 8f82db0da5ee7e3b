"""
Interfaces layer package.

Contains FastAPI routers, Pydantic schemas and request preconditions.
No business logic belongs here.
"""
