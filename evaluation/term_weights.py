"""
Analysis of term scoring results

Turns a NewsArticles result into pandas frames, verifies that each term's
weights add up to one across the corpus and plots how term weights move
over time.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from typing import Dict, List, Optional, Tuple

from news_scoring.terms_score import NewsArticles


def weights_frame(articles: NewsArticles, as_datetime: bool = False) -> pd.DataFrame:
    """
    Articles x terms matrix of weights

    Args:
        articles: result of TermScorer.score
        as_datetime: convert the date index to timestamps (dates produced
            by to_timestamp are nanoseconds since the epoch)

    Returns:
        DataFrame indexed by date, one column per term, 0.0 where absent
    """
    frame = articles.to_frame()
    if as_datetime:
        frame.index = pd.to_datetime(frame.index)
    return frame.reindex(sorted(frame.columns), axis=1)


def term_weight_totals(articles: NewsArticles) -> pd.Series:
    """Sum of each term's weights over all articles"""
    return weights_frame(articles).sum(axis=0)


def unbalanced_terms(articles: NewsArticles, atol: float = 1e-9) -> List[str]:
    """Terms whose weights do not add up to 1 across the corpus"""
    totals = term_weight_totals(articles)
    return totals.index[~np.isclose(totals.values, 1.0, atol=atol)].tolist()


def top_terms(articles: NewsArticles, k: int = 5) -> List[Tuple[object, List[Tuple[str, float]]]]:
    """
    Highest weighted terms of each article, in date order

    Ties are broken alphabetically so the listing is reproducible.
    """
    ranked = []
    for date, weights in articles:
        best = sorted(weights.items(), key=lambda x: (-x[1], x[0]))[:k]
        ranked.append((date, best))
    return ranked


def compute_statistics(articles: NewsArticles) -> Dict[str, float]:
    """Summary numbers for a scoring run"""
    terms_per_article = [len(weights) for _, weights in articles]
    vocabulary = {term for _, weights in articles for term in weights}
    return {
        'n_articles': len(articles),
        'n_terms': len(vocabulary),
        'mean_terms_per_article': float(np.mean(terms_per_article)) if terms_per_article else 0.0,
        'empty_articles': sum(1 for n in terms_per_article if n == 0),
    }


def plot_term_weights(
    articles: NewsArticles,
    terms: Optional[List[str]] = None,
    max_terms: int = 6,
    as_datetime: bool = True,
    save_path: str = "term_weights.png"
) -> str:
    """
    Plot term weights against article release date

    Args:
        articles: result of TermScorer.score
        terms: terms to plot; defaults to those found in the most articles
        max_terms: number of default terms
        as_datetime: interpret dates as epoch nanoseconds
        save_path: image file to write

    Returns:
        save_path
    """
    frame = weights_frame(articles, as_datetime=as_datetime)
    if terms is None:
        coverage = (frame > 0).sum(axis=0).sort_values(ascending=False, kind='stable')
        terms = coverage.index[:max_terms].tolist()

    sns.set_style("whitegrid")
    fig, ax = plt.subplots(figsize=(12, 6))
    for term in terms:
        ax.plot(frame.index, frame[term], marker='o', label=term)

    ax.set_xlabel("Release date")
    ax.set_ylabel("Term weight")
    ax.set_title("Term weights over time")
    if terms:
        ax.legend(loc='upper right')
    fig.tight_layout()
    fig.savefig(save_path, dpi=150)
    plt.close(fig)

    print(f"Saved term weight plot to {save_path}")
    return save_path
