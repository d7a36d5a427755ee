"""
Place catalog package.

Responsibilities:
- Define the canonical Place schema and its VisiblePlace projection.
- Provide the catalog snapshot (built-in sample data or a CSV file).
- Own the favorite set behind a single controlled mutator.
"""
