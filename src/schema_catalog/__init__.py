"""
Schema Catalog - Uniform Relational Schema Access

An in-memory schema catalog built from either:
- Static DDL text (CREATE TABLE / CREATE INDEX / CREATE VIEW)
- Live database introspection (INFORMATION_SCHEMA)

Both sources are exposed through the same loader contract so code
generators can treat them interchangeably.
"""

__version__ = "0.1.0"
