"""
Core types for phrase tokenization.
"""

type TokenId = int
type Phrase = str
type Tokens = list[Phrase]
type TokenIds = list[TokenId]
