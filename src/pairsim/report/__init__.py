"""Report module for scored file pairs.

This package contains:
- scored_pair: ScoredPair and the canonical unordered pair key
- store: PairStore, the per-run result set, and ranking
"""
