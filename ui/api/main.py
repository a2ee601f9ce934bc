"""FastAPI layer that exposes FAQ search and browsing."""
from __future__ import annotations

from fastapi import Depends, FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel

from application.use_cases.browse import find_entry, list_categories, select_categories
from application.use_cases.search import search
from domain.entities import FaqCategory, ScoredEntry
from infrastructure.config import Container, build_default_container
from ui.logging_utils import setup_logging

setup_logging()
app = FastAPI(title="FAQ Search API")
container = build_default_container()


def get_container() -> Container:
    return container


class EntryPayload(BaseModel):
    id: str
    question: str
    answer: str


class SearchResultPayload(EntryPayload):
    score: int
    category_id: str
    category_name: str


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResultPayload]


class CategorySummaryPayload(BaseModel):
    id: str
    name: str
    entry_count: int


class CategoryPayload(BaseModel):
    id: str
    name: str
    questions: list[EntryPayload]


def _result_payload(result: ScoredEntry) -> SearchResultPayload:
    return SearchResultPayload(
        id=result.id,
        question=result.question,
        answer=result.answer,
        score=result.score,
        category_id=result.category_id,
        category_name=result.category_name,
    )


def _category_payload(category: FaqCategory) -> CategoryPayload:
    return CategoryPayload(
        id=category.id,
        name=category.name,
        questions=[EntryPayload(id=e.id, question=e.question, answer=e.answer) for e in category.entries],
    )


@app.get("/search", response_model=SearchResponse)
def search_endpoint(
    q: str = FastAPIQuery("", description="Free-text query"),
    limit: int | None = FastAPIQuery(None, ge=0, description="Maximum number of results"),
    deps: Container = Depends(get_container),
) -> SearchResponse:
    corpus = deps.corpus_provider.load()
    results = search(corpus, q, deps.result_limit if limit is None else limit)
    return SearchResponse(query=q, results=[_result_payload(result) for result in results])


@app.get("/categories", response_model=list[CategorySummaryPayload])
def categories_endpoint(deps: Container = Depends(get_container)) -> list[CategorySummaryPayload]:
    summaries = list_categories(deps.corpus_provider.load())
    return [CategorySummaryPayload(id=s.id, name=s.name, entry_count=s.entry_count) for s in summaries]


@app.get("/categories/{category_id}", response_model=CategoryPayload)
def category_endpoint(category_id: str, deps: Container = Depends(get_container)) -> CategoryPayload:
    selected = select_categories(deps.corpus_provider.load(), category_id)
    if not selected:
        raise HTTPException(status_code=404, detail=f"Unknown category '{category_id}'")
    return _category_payload(selected[0])


@app.get("/entries/{entry_id}", response_model=SearchResultPayload)
def entry_endpoint(entry_id: str, deps: Container = Depends(get_container)) -> SearchResultPayload:
    found = find_entry(deps.corpus_provider.load(), entry_id)
    if found is None:
        raise HTTPException(status_code=404, detail=f"Unknown question '{entry_id}'")
    return _result_payload(found)
