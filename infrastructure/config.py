"""Dependency wiring for the FAQ help center."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Literal, Mapping

from application.use_cases.search import DEFAULT_LIMIT
from domain.interfaces import CorpusProvider
from infrastructure.corpus.in_memory_corpus_provider import InMemoryCorpusProvider
from infrastructure.corpus.json_corpus_provider import JsonCorpusProvider
from infrastructure.repositories.sqlite_corpus_repository import SqliteCorpusRepository


CorpusSourceName = Literal["json", "sqlite", "memory"]


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    corpus_provider: CorpusProvider
    result_limit: int = DEFAULT_LIMIT


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for selecting the corpus source and result size."""

    corpus_source: CorpusSourceName = "json"
    corpus_path: str = "data/faq.json"
    db_path: str = "faqsearch.db"
    result_limit: int = DEFAULT_LIMIT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ContainerConfig":
        """Build a config from ``FAQSEARCH_*`` environment variables."""

        env = os.environ if environ is None else environ
        defaults = cls()
        raw_limit = env.get("FAQSEARCH_RESULT_LIMIT")
        if raw_limit is None:
            result_limit = defaults.result_limit
        else:
            try:
                result_limit = int(raw_limit)
            except ValueError as exc:
                raise ValueError(f"FAQSEARCH_RESULT_LIMIT must be an integer, got '{raw_limit}'") from exc
        return cls(
            corpus_source=env.get("FAQSEARCH_CORPUS_SOURCE", defaults.corpus_source),  # type: ignore[arg-type]
            corpus_path=env.get("FAQSEARCH_CORPUS_PATH", defaults.corpus_path),
            db_path=env.get("FAQSEARCH_DB_PATH", defaults.db_path),
            result_limit=result_limit,
        )


_CORPUS_FACTORIES: dict[CorpusSourceName, Callable[[ContainerConfig], CorpusProvider]] = {
    "json": lambda cfg: JsonCorpusProvider(cfg.corpus_path),
    "sqlite": lambda cfg: SqliteCorpusRepository(cfg.db_path),
    "memory": lambda cfg: InMemoryCorpusProvider(),
}


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig.from_env()
    try:
        factory = _CORPUS_FACTORIES[cfg.corpus_source]
    except KeyError as exc:
        raise ValueError(f"Unknown corpus source '{cfg.corpus_source}'") from exc
    return Container(corpus_provider=factory(cfg), result_limit=cfg.result_limit)


__all__ = ["Container", "ContainerConfig", "build_default_container"]
