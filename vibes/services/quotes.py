from __future__ import annotations

import random
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..config import Settings, get_settings
from ..data.quotes import QUOTES
from ..models.quote import Quote
from .cache import Clock, TtlSlot


@dataclass
class QuoteService:
    settings: Settings | None = None
    quotes: Sequence[Quote] = QUOTES
    rng: random.Random | None = None
    clock: Clock = time.monotonic
    _slot: TtlSlot[Quote] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()
        if self.rng is None:
            self.rng = random.Random()
        self._slot = TtlSlot(ttl=self.settings.quote_ttl, clock=self.clock)

    def get_quote(self) -> Quote:
        cached = self._slot.get()
        if cached is not None:
            return cached
        quote = self.rng.choice(self.quotes)
        self._slot.set(quote)
        return quote

    def all_quotes(self) -> list[Quote]:
        return list(self.quotes)
