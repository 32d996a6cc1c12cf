"""
Date-ranked term scoring of news articles.
"""

from .terms_score import NewsArticles, TermScorer

__all__ = ['NewsArticles', 'TermScorer']
