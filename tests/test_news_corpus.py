import numpy as np
import pandas as pd
import pytest

from news_scoring import Document, NewsCorpus, TermScorer, load_news_articles, to_timestamp, to_words


def test_from_documents_round_trips_in_order(corpus):
    news = NewsCorpus.from_documents(corpus)

    assert len(news) == 2
    assert news.documents() == corpus
    assert list(news) == corpus


def test_extra_columns_are_ignored():
    df = pd.DataFrame({
        "date": ["2020-01-01"],
        "title": ["t"],
        "content": ["body"],
        "topic": ["sports"],
    })

    assert NewsCorpus(df).documents() == [Document("2020-01-01", "t", "body")]


def test_missing_columns_rejected():
    with pytest.raises(ValueError, match="date"):
        NewsCorpus(pd.DataFrame({"title": ["t"], "content": ["c"]}))


def test_load_news_articles_keeps_raw_strings(tmp_path):
    path = tmp_path / "news.tsv"
    path.write_text(
        "date\ttitle\tcontent\n"
        "2020-01-02\tSecond\tstocks rally\n"
        "2020-01-01\t\tmarkets fall\n",
        encoding="utf-8",
    )

    news = load_news_articles(str(path))

    assert news.documents() == [
        Document("2020-01-02", "Second", "stocks rally"),
        Document("2020-01-01", "", "markets fall"),
    ]


def test_missing_values_read_as_empty_strings():
    df = pd.DataFrame({"date": ["2020-01-01"], "title": [np.nan], "content": [np.nan]})

    assert NewsCorpus(df).documents() == [Document("2020-01-01", "", "")]


def test_missing_content_fails_scoring():
    df = pd.DataFrame({
        "date": ["2020-01-01", "2020-01-02"],
        "title": ["t", "u"],
        "content": [np.nan, "nan run"],
    })
    scorer = TermScorer(to_timestamp, to_words, {"nan": "nan", "run": "run"})

    assert scorer.score(NewsCorpus(df)) is None


def test_empty_date_in_loaded_file_fails_scoring(tmp_path, lexicon):
    path = tmp_path / "news.tsv"
    path.write_text(
        "date\ttitle\tcontent\n"
        "2020-01-02\tA\trun runs\n"
        "\tB\tjumped\n",
        encoding="utf-8",
    )

    scorer = TermScorer(to_timestamp, to_words, lexicon)

    assert scorer.score(load_news_articles(str(path))) is None
