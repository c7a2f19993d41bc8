"""Domain layer: association value objects, rules and diagnostics.

Pure code only: nothing here talks to an ORM or a database.
"""
