"""
Browse engine.

Responsibilities:
- Filter the place catalog by name search and category.
- Merge favorite status into every result, fresh on each query.
- Hold per-session filter state and notify subscribers on change.
"""
