"""Integration tests.

Purpose
- Exercise matchers against real databases and ORM mappings.

Guidelines
- Use realistic configuration and setup/teardown per test or suite.
- Minimize mocking; prefer in-memory SQLite engines built with make_engine().
- Mark as 'integration' and keep them slower but reliable.
"""
