import pandas as pd
import pytest

from news_scoring import load_lexicon, to_timestamp, to_words


def test_to_words_lowercases_and_drops_punctuation():
    assert to_words("Stocks RALLY, investors don't panic!") == [
        "stocks", "rally", "investors", "don't", "panic",
    ]


def test_to_words_empty_text():
    assert to_words("   ") == []


def test_to_timestamp_orders_dates():
    assert to_timestamp("2020-01-01") < to_timestamp("2020-01-02") < to_timestamp("2020-01-02 10:30")
    assert to_timestamp("2020-01-01") == pd.Timestamp("2020-01-01").value


def test_to_timestamp_rejects_garbage():
    with pytest.raises(ValueError):
        to_timestamp("yesterday-ish")


def test_load_lexicon(tmp_path):
    path = tmp_path / "lexicon.txt"
    path.write_text(
        "# market terms\n"
        "Rally,rally\n"
        "rallied, rally\n"
        "\n"
        "crash\n",
        encoding="utf-8",
    )

    assert load_lexicon(str(path)) == {"rally": "rally", "rallied": "rally", "crash": "crash"}


def test_load_lexicon_rejects_malformed_line(tmp_path):
    path = tmp_path / "lexicon.txt"
    path.write_text("fell,fall,falls\n", encoding="utf-8")

    with pytest.raises(ValueError, match="lexicon.txt:1"):
        load_lexicon(str(path))


@pytest.mark.parametrize("raw", ["", "NaT", "nan"])
def test_to_timestamp_rejects_missing_dates(raw):
    with pytest.raises(ValueError, match="Missing release date"):
        to_timestamp(raw)
