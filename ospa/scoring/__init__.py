"""
scoring/ - OSPA Scoring Engine

Modules:
    utils.py                  - Decimal utilities
    rubric.py                 - Point tables, weights, total lookups, JSON overrides
    aggregation.py            - Weighted-by-level, max-per-level and flat sums
    interview_calculator.py   - Interview total (2 × Σ sub-scores)
    rating_calculator.py      - Average performance rating and band (Adviser)
    adviser_calculator.py     - Adviser grand total
    journalist_calculator.py  - Journalist grand total
    engine.py                 - Dispatch on nomination type
    projection.py             - 2/3-decimal formatting for display and payload
"""
