"""Token model: a word occurrence and its candidate readings.

A token can carry several readings at once because the tagger does not
decide between them. Both classes are frozen; the rule engine only reads
them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

SENTENCE_START_TAG = "SENT_START"


@dataclass(frozen=True)
class AnalyzedToken:
    """One morphological reading of a token.

    Attributes:
        token: The surface string the reading belongs to.
        pos_tag: Part-of-speech tag (e.g. ``"NCFS000"``) or ``None`` when the
            tagger knows nothing about the word.
        lemma: Base form, if known.
    """

    token: str
    pos_tag: str | None = None
    lemma: str | None = None


@dataclass(frozen=True)
class AnalyzedTokenReadings:
    """A token with its offsets and every candidate reading.

    ``readings`` is never empty: an unanalysable token gets one placeholder
    reading whose ``pos_tag`` is ``None``.
    """

    token: str
    start_pos: int
    readings: tuple[AnalyzedToken, ...] = field(default_factory=tuple)
    is_whitespace: bool = False

    def __post_init__(self) -> None:
        if self.start_pos < 0:
            raise ValueError(f"start_pos must not be negative: {self.start_pos}")
        readings = tuple(self.readings)
        if not readings:
            readings = (AnalyzedToken(self.token),)
        object.__setattr__(self, "readings", readings)

    @property
    def end_pos(self) -> int:
        return self.start_pos + len(self.token)

    @property
    def is_sentence_start(self) -> bool:
        return any(r.pos_tag == SENTENCE_START_TAG for r in self.readings)

    @property
    def pos_tags(self) -> tuple[str, ...]:
        return tuple(r.pos_tag for r in self.readings if r.pos_tag is not None)

    def has_pos_tag(self, pos_tag: str) -> bool:
        return pos_tag in self.pos_tags

    @classmethod
    def sentence_start(cls) -> "AnalyzedTokenReadings":
        """Synthetic token that opens every analysed sentence."""
        return cls(
            token="",
            start_pos=0,
            readings=(AnalyzedToken("", SENTENCE_START_TAG, None),),
        )

    def __str__(self) -> str:
        tags = ",".join(r.pos_tag or "?" for r in self.readings)
        return f"{self.token}[{tags}]"
