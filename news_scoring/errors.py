"""
Exceptions raised by the term scoring pipeline
"""


class InvalidConfiguration(ValueError):
    """A TermScorer was built without a required extractor or lexicon"""


class MissingOrdering(InvalidConfiguration):
    """No total ordering is available for the extracted date values"""


class InvalidArgument(ValueError):
    """Bad input passed to a scoring stage (undefined corpus or text)"""
