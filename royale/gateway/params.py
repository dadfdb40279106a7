"""Query parameters shared by RoyaleAPI endpoints.

Most endpoints accept field filtering (``keys``/``exclude``) and pagination
(``max``/``page``); the search endpoints additionally take a few filters.
See https://docs.royaleapi.com/#/field_filter and
https://docs.royaleapi.com/#/pagination
"""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence
from urllib.parse import urlencode

Query = Mapping[str, Sequence[str]]


@dataclass
class QueryParams:
    """Optional filter, pagination and search parameters.

    Zero values are left out of the query string entirely.

    Attributes:
        keys: Only return these fields
        exclude: Return every field except these
        max: Page size
        page: Page index
        name: Name to search for (clan and tournament search)
        score: Minimum clan score (clan search)
        min_members: Minimum member count (clan search)
        max_members: Maximum member count (clan search)
        location_id: Location ID (clan search)

    Example:
        >>> QueryParams(exclude=["name"]).to_query()
        {'exclude': ['name']}
    """

    keys: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    max: int = 0
    page: int = 0
    name: str = ""
    score: int = 0
    min_members: int = 0
    max_members: int = 0
    location_id: int = 0

    def to_query(self) -> Dict[str, List[str]]:
        """Render the non-zero parameters as a query mapping."""
        query: Dict[str, List[str]] = {}
        if self.keys:
            query["keys"] = [",".join(self.keys)]
        if self.exclude:
            query["exclude"] = [",".join(self.exclude)]
        if self.max:
            query["max"] = [str(self.max)]
        if self.page:
            query["page"] = [str(self.page)]
        if self.name:
            query["name"] = [self.name]
        if self.score:
            query["score"] = [str(self.score)]
        if self.min_members:
            query["minMembers"] = [str(self.min_members)]
        if self.max_members:
            query["maxMembers"] = [str(self.max_members)]
        if self.location_id:
            query["locationId"] = [str(self.location_id)]
        return query


def encode_query(query: Optional[Query] = None) -> str:
    """Encode a query mapping into a query string.

    Keys are sorted and multi-valued keys repeated. Keys whose value list is
    empty, and empty values, are dropped; an empty mapping encodes to "".
    """
    if not query:
        return ""
    pairs = []
    for key in sorted(query):
        values = query[key]
        if isinstance(values, str):
            values = [values]
        pairs.extend((key, value) for value in values if value != "")
    return urlencode(pairs)
