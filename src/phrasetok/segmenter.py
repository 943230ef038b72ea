"""Whitespace word segmentation with codepoint offsets."""

from dataclasses import dataclass

import regex as re

# maximal run of non-whitespace; regex `\s` covers all Unicode whitespace
_WORD_PAT = re.compile(r"\S+")
# trailing punctuation run of a word, e.g. the "." of "way."
_END_PUNCT_PAT = re.compile(r"\p{P}+$")


@dataclass(frozen=True, slots=True)
class WordSpan:
    """A maximal non-whitespace run of the input and its position."""

    text: str
    start: int
    end: int


class WhitespaceSegmenter:
    """
    Split text into ordered word spans using Unicode whitespace as delimiter.

    With ``split_end_punctuation`` a trailing punctuation run is split off a
    word into its own span, so "way." yields "way" and ".". Words made only of
    punctuation are kept whole.
    """

    def __init__(self, split_end_punctuation: bool = False) -> None:
        self.split_end_punctuation = split_end_punctuation

    def segment(self, text: str) -> list[WordSpan]:
        """Return the word spans of ``text`` in left-to-right order."""
        spans: list[WordSpan] = []
        for m in _WORD_PAT.finditer(text):
            word, start, end = m.group(0), m.start(), m.end()
            if self.split_end_punctuation:
                punct = _END_PUNCT_PAT.search(word)
                if punct is not None and punct.start() > 0:
                    cut = start + punct.start()
                    spans.append(WordSpan(text[start:cut], start, cut))
                    spans.append(WordSpan(text[cut:end], cut, end))
                    continue
            spans.append(WordSpan(word, start, end))
        return spans
