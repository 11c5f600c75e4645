"""
Workload definitions for cache latency benchmarking.

Defines the payload shapes every store is measured against:
1. integer   - a single small number
2. stats     - a JSON array of 100 numbers
3. paragraph - one ~150 word sentence
4. article   - a 2000 word block of text
5. webpage   - a real-world HTML page loaded from the fixtures directory
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from faker import Faker

from .fixtures import WEBPAGE_FIXTURE, FixtureStore

MAX_RANDOM_NUMBER = 9999
STATS_SAMPLE_SIZE = 100
PARAGRAPH_WORDS = 150
ARTICLE_WORDS = 2000


class WorkloadName(Enum):
    """Workloads in report display order."""

    INTEGER = "integer"
    STATS = "stats"
    PARAGRAPH = "paragraph"
    ARTICLE = "article"
    WEBPAGE = "webpage"

    @property
    def title(self) -> str:
        """Capitalised name used in report tables."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Payload:
    """A generated value written to and read from the store."""

    name: WorkloadName
    data: str

    @property
    def size_bytes(self) -> int:
        return len(self.data.encode("utf-8"))


class WordSource:
    """Seedable source of random numbers and filler words, backed by Faker.

    ``vocabulary`` replaces Faker's lorem word list when given.
    """

    def __init__(self, seed: Optional[int] = None, vocabulary: Optional[Sequence[str]] = None):
        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)
        self.vocabulary = list(vocabulary) if vocabulary is not None else None

    def number(self, upper: int = MAX_RANDOM_NUMBER) -> int:
        """Random integer in [0, upper)."""
        return self.faker.random_int(min=0, max=upper - 1)

    def words(self, count: int) -> list[str]:
        return self.faker.words(nb=count, ext_word_list=self.vocabulary)

    def sentence(self, nb_words: int, variable: bool = True) -> str:
        """A sentence of roughly nb_words words (±40% when variable)."""
        return self.faker.sentence(
            nb_words=nb_words,
            variable_nb_words=variable,
            ext_word_list=self.vocabulary,
        )


class PayloadGenerator:
    """Produces payloads for each workload on demand.

    Payloads are built lazily so that a fixture failure surfaces only when
    the webpage workload is reached.
    """

    def __init__(self, source: Optional[WordSource] = None, fixtures: Optional[FixtureStore] = None):
        self.source = source or WordSource()
        self.fixtures = fixtures or FixtureStore()

    def generate(self, name: WorkloadName) -> Payload:
        """Build a fresh payload for a workload."""
        builders = {
            WorkloadName.INTEGER: self._integer,
            WorkloadName.STATS: self._stats,
            WorkloadName.PARAGRAPH: self._paragraph,
            WorkloadName.ARTICLE: self._article,
            WorkloadName.WEBPAGE: self._webpage,
        }
        return Payload(name=name, data=builders[name]())

    def iter_payloads(self, names: Optional[Sequence[WorkloadName]] = None) -> Iterator[Payload]:
        for name in names or list(WorkloadName):
            yield self.generate(name)

    def _integer(self) -> str:
        return str(self.source.number())

    def _stats(self) -> str:
        return json.dumps([self.source.number() for _ in range(STATS_SAMPLE_SIZE)])

    def _paragraph(self) -> str:
        return self.source.sentence(PARAGRAPH_WORDS)

    def _article(self) -> str:
        return " ".join(self.source.words(ARTICLE_WORDS))

    def _webpage(self) -> str:
        return self.fixtures.read(WEBPAGE_FIXTURE)


def list_workloads() -> list[str]:
    """List workload names in display order."""
    return [w.value for w in WorkloadName]


def select_workloads(names: Optional[Sequence[str]] = None) -> list[WorkloadName]:
    """Resolve workload names, keeping declaration order.

    Raises ValueError for names that are not workloads.
    """
    if not names:
        return list(WorkloadName)
    requested = {WorkloadName(n) for n in names}
    return [w for w in WorkloadName if w in requested]
