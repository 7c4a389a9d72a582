"""
Static quote lists and the logic that decides which list serves a request.
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from quote_backend.store import QuoteRecord, QuoteStore, RemoteStoreError

logger = logging.getLogger(__name__)

# SystemRandom draws from os.urandom, so one instance is safe to share across
# the worker threads FastAPI runs sync handlers on.
_rng = random.SystemRandom()


FALLBACK_QUOTES: tuple[QuoteRecord, ...] = (
    QuoteRecord(1, "✨ The best way to get started is to quit talking and begin doing.", "Walt Disney"),
    QuoteRecord(2, "🔥 Don't let yesterday take up too much of today.", "Will Rogers"),
    QuoteRecord(3, "💪 It's not whether you get knocked down, it's whether you get up.", "Vince Lombardi"),
    QuoteRecord(4, "🚀 If you are working on something exciting, it will keep you motivated.", "GenZ Wisdom"),
    QuoteRecord(5, "🌈 Success is not in what you have, but who you are.", "Bo Bennett"),
    QuoteRecord(6, "😎 Dream big, hustle harder.", "GenZ Motivation"),
    QuoteRecord(7, "👾 Stay weird, stay creative.", "GenZ Vibes"),
    QuoteRecord(8, "🦄 Be yourself, everyone else is taken.", "Oscar Wilde"),
    QuoteRecord(9, "💥 Make it happen, Gen Z style!", "GenZ Energy"),
    QuoteRecord(10, "🌟 You are the main character of your story.", "GenZ Wisdom"),
)

_STATIC_TEXTS = (
    "✨ The best way to get started is to quit talking and begin doing.",
    "🔥 Don't let yesterday take up too much of today.",
    "💪 It's not whether you get knocked down, it's whether you get up.",
    "🚀 If you are working on something exciting, it will keep you motivated.",
    "🌈 Success is not in what you have, but who you are.",
    "😎 Dream big, hustle harder.",
    "👾 Stay weird, stay creative.",
    "🦄 Be yourself, everyone else is taken.",
    "💥 Make it happen, Gen Z style!",
    "🌟 You are the main character of your story.",
    "🎧 Good vibes only.",
    "💡 Think different, act bold.",
    "🫶 Spread kindness like confetti.",
    "📱 Disconnect to reconnect.",
    "🕺 Dance like nobody's watching.",
    "🍀 Luck is when preparation meets opportunity.",
    "🧠 Mindset is everything.",
    "🔥 Hustle in silence, let success make the noise.",
    "🌊 Go with the flow, but make waves.",
    "🎨 Create your own reality.",
    "💬 Speak your truth.",
    "🌻 Grow through what you go through.",
    "🦋 Change is beautiful.",
    "🎲 Take risks, regret nothing.",
    "💎 Shine bright, even on cloudy days.",
    "🌌 The future belongs to those who believe in the beauty of their dreams.",
    "🌍 Your limitation—it's only your imagination.",
    "🌠 Push yourself, because no one else is going to do it for you.",
    "🌻 Great things never come from comfort zones.",
    "🌈 Dream it. Wish it. Do it.",
    "💪 Success doesn’t just find you. You have to go out and get it.",
    "🌟 The harder you work for something, the greater you’ll feel when you achieve it.",
    "🌊 Dream bigger. Do bigger.",
    "💡 Don’t stop when you’re tired. Stop when you’re done.",
    "🔥 Wake up with determination. Go to bed with satisfaction.",
    "🌻 Do something today that your future self will thank you for.",
    "🌌 Little things make big days.",
    "🌈 It’s going to be hard, but hard does not mean impossible.",
    "💎 Push yourself, because no one else is going to do it for you.",
)

STATIC_QUOTES: tuple[QuoteRecord, ...] = tuple(
    QuoteRecord(index, text) for index, text in enumerate(_STATIC_TEXTS, start=1)
)


class QuoteResolver:
    """
    Decides which quote list serves a request.

    With no store (remote configuration absent) the fallback list is used
    directly. Otherwise the store is queried, and any failure, a "no data"
    answer, or an empty list all resolve to the fallback list. resolve()
    never raises.
    """

    def __init__(
        self,
        store: Optional[QuoteStore],
        fallback: Sequence[QuoteRecord] = FALLBACK_QUOTES,
    ):
        if not fallback:
            raise ValueError("Fallback quote list must not be empty")
        self.store = store
        self.fallback = tuple(fallback)

    @property
    def has_remote_store(self) -> bool:
        return self.store is not None

    def resolve(self) -> list[QuoteRecord]:
        if self.store is None:
            logger.debug("Using fallback quotes (no remote store configured)")
            return list(self.fallback)

        try:
            quotes = self.store.list_quotes()
        except RemoteStoreError as exc:
            logger.warning("Using fallback quotes (remote store error: %s)", exc)
            return list(self.fallback)

        if not quotes:
            logger.info("Using fallback quotes (remote store returned no data)")
            return list(self.fallback)

        logger.info("Retrieved %d quotes from remote store", len(quotes))
        return list(quotes)


def pick_random_quote(
    quotes: Sequence[QuoteRecord], rng: random.Random | None = None
) -> QuoteRecord:
    """Return one quote chosen uniformly. `quotes` must be non-empty."""
    if not quotes:
        raise IndexError("Cannot pick a quote from an empty list")
    rng = rng or _rng
    return quotes[rng.randrange(len(quotes))]
