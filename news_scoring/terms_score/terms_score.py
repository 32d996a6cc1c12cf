import logging
from collections import Counter
from typing import (Any, Callable, Dict, Generic, Iterable, Iterator, List, Mapping,
                    Optional, Sequence, Tuple, TypeVar, get_type_hints)

import pandas as pd

from news_scoring.errors import InvalidArgument, InvalidConfiguration, MissingOrdering
from news_scoring.news_corpus import Document

T = TypeVar('T')

# Types whose comparison operators exist but do not define a total order
UNORDERED_TYPES = (complex, dict, set, frozenset, type(None))


class NewsArticles(Generic[T]):
    """
    Ordered sequence of (date, {term: weight}) pairs, one per news article
    """

    def __init__(self):
        self.articles: List[Tuple[T, Dict[str, float]]] = []

    def add(self, date: T, weights: Dict[str, float]):
        self.articles.append((date, weights))

    @property
    def dates(self) -> List[T]:
        return [date for date, _ in self.articles]

    def to_frame(self) -> pd.DataFrame:
        """One row per article indexed by date, one column per term (absent terms are 0.0)"""
        frame = pd.DataFrame(
            [weights for _, weights in self.articles],
            index=pd.Index(self.dates, name='date'),
        )
        return frame.fillna(0.0)

    def __len__(self) -> int:
        return len(self.articles)

    def __iter__(self) -> Iterator[Tuple[T, Dict[str, float]]]:
        return iter(self.articles)

    def __getitem__(self, idx: int) -> Tuple[T, Dict[str, float]]:
        return self.articles[idx]

    def __eq__(self, other) -> bool:
        if not isinstance(other, NewsArticles):
            return NotImplemented
        return self.articles == other.articles

    def __repr__(self) -> str:
        return f"NewsArticles({self.articles!r})"


def _natural_order(value):
    return value


def _derive_ordering(to_date: Callable[[str], Any]) -> Callable[[Any], Any]:
    """
    Natural ordering of the date values, checked against the return
    annotation of the date extractor when it has one.
    """
    try:
        return_type = get_type_hints(to_date).get('return')
    except (TypeError, NameError):
        return_type = None

    if isinstance(return_type, type):
        if issubclass(return_type, UNORDERED_TYPES) or return_type.__lt__ is object.__lt__:
            raise MissingOrdering(
                f"TermScorer: no ordering defined for date values of type {return_type.__name__}"
            )
    return _natural_order


class TermScorer(Generic[T]):
    """
    Extract and score terms from a corpus of dated news articles

    Articles are ranked by release date, the words of each article are
    reduced to their lexicon root and counted, then every count is divided
    by the total count of that term across the corpus. A term's weights
    over all articles therefore sum to 1.
    """

    def __init__(self,
                 to_date: Callable[[str], T],
                 to_words: Callable[[str], Sequence[str]],
                 lexicon: Mapping[str, str],
                 ordering: Optional[Callable[[T], Any]] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Args:
            to_date: converts a raw release date into an orderable value
            to_words: extracts the words of an article's content
            lexicon: {word: root word}, words missing from it are ignored
            ordering: sort key over date values, derived from the natural
                ordering of the values when omitted
            logger: receives scoring failures, defaults to the module logger

        Raises:
            InvalidConfiguration: an extractor or the lexicon is undefined
            MissingOrdering: the date values cannot be ordered
        """
        if not callable(to_date):
            raise InvalidConfiguration("TermScorer cannot score a text without an extractor for the release date")
        if not callable(to_words):
            raise InvalidConfiguration("TermScorer cannot score a text without a word extractor")
        if lexicon is None or not isinstance(lexicon, Mapping):
            raise InvalidConfiguration("TermScorer cannot score a text without a lexicon")

        if ordering is None:
            ordering = _derive_ordering(to_date)
        elif not callable(ordering):
            raise MissingOrdering("TermScorer: ordering must be a sort key over date values")

        self.to_date = to_date
        self.to_words = to_words
        self.lexicon = dict(lexicon)
        self.ordering = ordering
        self.logger = logger or logging.getLogger(__name__)

    def score(self, corpus: Iterable[Document]) -> Optional[NewsArticles[T]]:
        """
        Organize a corpus into news articles ordered by release date

        Args:
            corpus: documents (date, title, content), or a NewsCorpus

        Returns:
            NewsArticles (date, {term: weight}) in date order, or None if
            any stage failed. Failures are logged, never raised.
        """
        try:
            docs = self._rank(corpus)
            counts = [(date, self._count(content)) for date, _, content in docs]

            total_counts = Counter()
            for _, cnt in counts:
                total_counts.update(cnt)

            articles = NewsArticles()
            for date, cnt in counts:
                articles.add(date, {term: n / total_counts[term] for term, n in cnt.items()})
            return articles

        except Exception as e:
            self.logger.error("TermScorer.score: %s", e, exc_info=True)
            return None

    def _rank(self, corpus: Optional[Iterable[Document]]) -> List[Tuple[T, str, str]]:
        docs = list(corpus) if corpus is not None else []
        if not docs:
            raise InvalidArgument("TermScorer.rank: cannot order an undefined or empty corpus")

        dated = [(self.to_date(date.strip()), title, content) for date, title, content in docs]
        # sorted() is stable: articles released on the same date keep corpus order
        return sorted(dated, key=lambda doc: self.ordering(doc[0]))

    def _count(self, text: str) -> Counter:
        if not text:
            raise InvalidArgument("TermScorer.count: cannot count the words of an undefined text")

        return Counter(self.lexicon[w] for w in self.to_words(text) if w in self.lexicon)
