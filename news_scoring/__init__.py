"""
Term scoring package for news article corpora.
"""

from .errors import InvalidArgument, InvalidConfiguration, MissingOrdering
from .extractors import load_lexicon, to_timestamp, to_words
from .news_corpus import Document, NewsCorpus, load_news_articles
from .terms_score import NewsArticles, TermScorer

__all__ = [
    'Document',
    'NewsCorpus',
    'load_news_articles',
    'NewsArticles',
    'TermScorer',
    'load_lexicon',
    'to_timestamp',
    'to_words',
    'InvalidArgument',
    'InvalidConfiguration',
    'MissingOrdering',
]
