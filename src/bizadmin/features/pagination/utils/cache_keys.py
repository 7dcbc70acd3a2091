"""Cache key construction for list pages."""

from ..entities.requests import ListQueryState


def build_cache_key(entity: str, state: ListQueryState) -> str:
    """Key for one page of ``entity``; all parameters that change the rows are in it."""
    return (
        f"{entity}_{state.normalized_search}"
        f"_page{state.page_index}_size{state.page_size}"
        f"_status{state.status_key}_sort{state.sort_order.value}"
    )


def search_prefix(entity: str, search_text: str = "") -> str:
    """Prefix covering every cached page of ``entity`` for exactly ``search_text``.

    Ends at the page marker so neither longer search terms nor entities that
    extend ``entity`` (``tasks_company5`` for ``tasks``) fall under it.
    """
    return f"{entity}_{search_text.strip().lower()}_page"
