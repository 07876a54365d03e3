import time

import pytest

from symsearch.data_ingestion import build_corpus
from symsearch.query import GLOBAL_RESULTS_LIMIT, rank, window


def create_large_package_data(packages: int, per_package: int) -> dict:
    """Create package data with packages * per_package entities."""
    data = {}
    for p in range(packages):
        data[f"pkg{p}"] = {
            "path": f"/core/pkg{p}",
            "entities": [
                {"name": f"make_thing_{i}" if i % 2 else f"ThingBuilder{i}", "kind": "p" if i % 2 else "t"}
                for i in range(per_package)
            ],
        }
    return {"packages": data}


@pytest.fixture(scope="module")
def large_corpus():
    return build_corpus(create_large_package_data(50, 100))


def test_large_corpus_size(large_corpus):
    assert len(large_corpus) == 5000


@pytest.mark.slow
@pytest.mark.parametrize("query", ["mt", "tb", "make_thing_4", "pkg7.Thing"])
def test_ranking_latency(large_corpus, query):
    """Test ranking 5000 entities stays interactive."""
    start = time.time()
    results = window(rank(large_corpus.entities, query), GLOBAL_RESULTS_LIMIT)
    duration_ms = (time.time() - start) * 1000

    assert len(results) > 0
    assert duration_ms < 2000, f"Ranking took {duration_ms:.2f}ms, expected <2000ms"
