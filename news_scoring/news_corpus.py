import pandas as pd
from typing import Iterable, Iterator, List, NamedTuple

"""
Container for dated news articles fed to the term scorer
"""

COLUMNS = ['date', 'title', 'content']


class Document(NamedTuple):
    """A single news article as supplied by the caller: (date, title, content)"""
    date: str
    title: str
    content: str


class NewsCorpus:
    def __init__(self, articles_df: pd.DataFrame):
        """
        Initialize with a DataFrame containing:
        - 'date': raw release date string
        - 'title': article title
        - 'content': article text

        Extra columns (topic, source, ...) are kept but ignored by scoring.
        """
        missing = [col for col in COLUMNS if col not in articles_df.columns]
        if missing:
            raise ValueError(f"Corpus is missing columns: {missing}")
        self.df = articles_df.reset_index(drop=True)

    @classmethod
    def from_documents(cls, documents: Iterable[Document]) -> 'NewsCorpus':
        rows = [(doc.date, doc.title, doc.content) for doc in documents]
        return cls(pd.DataFrame(rows, columns=COLUMNS))

    def documents(self) -> List[Document]:
        """Documents in corpus order"""
        return [
            Document(str(row.date), str(row.title), str(row.content))
            for row in self.df[COLUMNS].fillna("").itertuples(index=False)
        ]

    def __len__(self) -> int:
        return len(self.df)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents())


def load_news_articles(path: str, sep: str = '\t') -> NewsCorpus:
    """
    Load a corpus file with 'date', 'title' and 'content' columns

    Missing titles and contents are read as empty strings; dates are kept
    as raw strings so the scorer's date extractor decides how to parse them.
    """
    articles = pd.read_csv(path, sep=sep, dtype=str, keep_default_na=False)
    print(f"Loaded {len(articles)} articles from {path}")
    return NewsCorpus(articles)
