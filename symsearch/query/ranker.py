"""Entity ranking: match every entity against a query and order the hits."""

import logging
from typing import List, Optional, Sequence

from symsearch.matching import highlight, match
from symsearch.models import QUALIFIER_SEPARATOR, Entity, RankedEntity
from symsearch.query.filters import EntityFilter

logger = logging.getLogger(__name__)


def score_entity(entity: Entity, query: str) -> Optional[RankedEntity]:
    """Score a single entity, or return None if it does not match.

    Qualified names get a second pass on the bare name so that a query that
    matches the identifier itself outranks one that only matches by spanning
    the qualifier.
    """
    full = entity.full
    result = match(full, query)
    if not result.matched:
        return None

    score = result.score
    if QUALIFIER_SEPARATOR in full:
        base_name = full.split(QUALIFIER_SEPARATOR, 1)[1]
        base = match(base_name, query)
        if base.matched:
            score += base.score

    return RankedEntity(
        entity=entity,
        score=score,
        matched_positions=result.matched_positions,
        highlighted=highlight(full, result.matched_positions, merge=result.substring),
        substring=result.substring,
    )


def rank(
    entities: Sequence[Entity],
    query: str,
    filters: Optional[List[EntityFilter]] = None,
) -> List[RankedEntity]:
    """Rank entities against a query.

    Args:
        entities: Corpus entities (read only)
        query: Query text, already trimmed by the caller
        filters: Optional EntityFilter objects, all of which must pass

    Returns:
        Matching entities, best score first; equal scores are ordered by
        entity name and otherwise keep corpus order
    """
    if not query:
        return []

    results = []
    for entity in entities:
        if filters and not all(f.matches(entity) for f in filters):
            continue
        ranked = score_entity(entity, query)
        if ranked is not None:
            results.append(ranked)

    results.sort(key=lambda r: (-r.score, r.entity.name))

    logger.debug(f"Ranked {len(results)}/{len(entities)} entities for {query!r}")
    return results
