"""Adapters implementing the `relmatch.interfaces` ports.

- `metadata`: reflection over declarative models and SQLAlchemy ORM classes.
- `schema`: table/column existence checks (SQLAlchemy and in-memory).
- `db`: engine factory.
"""
