"""
Analysis helpers for term scoring results.
"""

from .term_weights import (
    weights_frame,
    term_weight_totals,
    unbalanced_terms,
    top_terms,
    compute_statistics,
    plot_term_weights
)

__all__ = [
    'weights_frame',
    'term_weight_totals',
    'unbalanced_terms',
    'top_terms',
    'compute_statistics',
    'plot_term_weights',
]
