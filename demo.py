import pandas as pd
from news_scoring import Document, TermScorer, to_timestamp, to_words
from evaluation import compute_statistics, top_terms

"""
Demo with sample data
"""
print("="*70)
print("News Term Scoring - Demo")
print("="*70)

# Create sample data
print("\n1. Creating sample news corpus...")

corpus = [
    Document('2014-04-03', 'Stocks rally on earnings', 'Stocks rallied as earnings beat estimates. Investors bought tech stocks.'),
    Document('2014-04-01', 'Markets slip', 'Stocks fell early, then recovered as investors weighed earnings.'),
    Document('2014-04-02', 'Oil prices climb', 'Oil rallied on supply worries; energy stocks rose.'),
    Document('2014-04-04', 'Quiet session', 'Trading was thin ahead of the holiday.'),
]

lexicon = {
    'stock': 'stock', 'stocks': 'stock',
    'rally': 'rally', 'rallied': 'rally',
    'earnings': 'earnings',
    'investor': 'investor', 'investors': 'investor',
    'fell': 'fall', 'fall': 'fall',
    'rose': 'rise', 'rise': 'rise',
    'oil': 'oil',
}

print(f"Created corpus with {len(corpus)} articles and a lexicon of {len(lexicon)} words")

print("\n2. Scoring terms...")
scorer = TermScorer(to_timestamp, to_words, lexicon)
articles = scorer.score(corpus)

print("\n" + "="*70)
print("TERM WEIGHTS (by release date)")
print("="*70)

for date, terms in top_terms(articles, k=3):
    listing = ', '.join(f"{term}={weight:.2f}" for term, weight in terms) or '(no lexicon terms)'
    print(f"  {pd.Timestamp(date).date()}: {listing}")

print("\nStatistics:", compute_statistics(articles))

print("\n" + "="*70)
print("Demo complete!")
