"""
Money Problem - Multi-Currency Portfolio Evaluation

Converts and aggregates money held in different currencies into a single
target currency using a table of pairwise exchange rates, reporting every
missing rate of an evaluation at once.
"""

__version__ = "1.0.0"
