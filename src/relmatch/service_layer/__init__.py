"""Service layer: the reflection reader and the matcher API built on it."""
