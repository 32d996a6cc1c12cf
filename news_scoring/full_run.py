import os
import sys
import json
import logging
import argparse

_parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _parent_dir not in sys.path:
    sys.path.insert(0, _parent_dir)

from news_scoring.extractors import load_lexicon, to_timestamp, to_words
from news_scoring.news_corpus import load_news_articles
from news_scoring.terms_score import NewsArticles, TermScorer

CORPUS_PATH = "data/news.tsv"
LEXICON_PATH = "data/lexicon.txt"
OUTPUT_PATH = "term_scores.json"


def articles_to_records(articles: NewsArticles):
    return [
        {"date": date, "weights": dict(sorted(weights.items()))}
        for date, weights in articles
    ]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Score lexicon terms of dated news articles")
    parser.add_argument("--corpus", default=CORPUS_PATH, help="TSV file with date, title, content columns")
    parser.add_argument("--lexicon", default=LEXICON_PATH, help="lexicon file, one 'word,root' per line")
    parser.add_argument("--output", default=OUTPUT_PATH, help="JSON file receiving the scores")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    corpus = load_news_articles(args.corpus)
    lexicon = load_lexicon(args.lexicon)
    print(f"Loaded lexicon with {len(lexicon)} words")

    scorer = TermScorer(to_timestamp, to_words, lexicon)
    articles = scorer.score(corpus)
    if articles is None:
        print("Scoring failed, see log for details.")
        return 1

    with open(args.output, "w") as f:
        json.dump(articles_to_records(articles), f, indent=4)

    print(f"Scored {len(articles)} articles, saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
