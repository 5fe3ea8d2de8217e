"""
Word Tiles - make as many words as you can from a handful of letter tiles.

Server side of the browser game: deals letters, validates submitted words
against the tiles and an online English dictionary, and tracks the score and
the all-time high score.
"""

__version__ = "0.1.0"
