"""Query Template Library: the static catalog of GraphQL documents."""

from tools.templates.mutations import MUTATIONS
from tools.templates.queries import QUERIES

__all__ = [
    "MUTATIONS",
    "QUERIES",
    "all_templates",
]


def all_templates():
    """Every query and mutation template, queries first."""
    return [*QUERIES.values(), *MUTATIONS.values()]
