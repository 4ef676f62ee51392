"""
POJO for a decoded `{items, pageDetails}` list envelope.
"""
from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

from autotask.pojos.PageDetails import PageDetails

E = TypeVar('E')


@dataclass
class QueryResult(Generic[E]):
    items: List[E] = field(default_factory=list)
    pageDetails: PageDetails = field(default_factory=PageDetails)

    @property
    def hasNextPage(self) -> bool:
        return bool(self.pageDetails.nextPageUrl)
