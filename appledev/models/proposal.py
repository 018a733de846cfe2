"""
Proposal Model
==============
Pydantic model for one curated Swift Evolution proposal.

Fields:
    id             — proposal identifier (e.g. "SE-0413")
    title          — proposal title
    status         — review status (implemented, accepted, ...)
    swift_version  — first Swift release shipping the feature, if known
    summary        — one-sentence description
    link           — proposal document URL
    keywords       — lowercase search terms matched against user queries
"""
from typing import List, Literal, Optional
from pydantic import BaseModel

ProposalStatus = Literal[
    "implemented",
    "accepted",
    "active-review",
    "scheduled",
    "returned",
    "rejected",
    "withdrawn",
]


class Proposal(BaseModel):
    id: str
    title: str
    status: ProposalStatus
    swift_version: Optional[str] = None
    summary: str
    link: str
    keywords: List[str] = []

    def has_keyword(self, keyword: str) -> bool:
        return keyword in self.keywords
