"""
Data models for chat processing.
Contains search results returned by the search provider.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SearchHit:
    """A single ranked search result."""
    title: str
    url: str
    content: str

    @classmethod
    def from_api(cls, item: dict) -> "SearchHit":
        """Build a hit from one entry of the provider's ``results`` list."""
        return cls(
            title=str(item.get("title", "")),
            url=str(item.get("url", "")),
            content=str(item.get("content", "")),
        )

    def render(self) -> str:
        return f"• {self.title} — {self.url}\n{self.content}"


@dataclass
class SearchResult:
    """Search provider response: an optional synthesized answer plus ranked hits."""
    answer: Optional[str] = None
    hits: list[SearchHit] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: dict, limit: int) -> "SearchResult":
        """
        Parse the provider JSON, keeping at most ``limit`` hits.

        Args:
            data: Decoded JSON body from the search provider
            limit: Maximum number of hits to keep

        Returns:
            SearchResult with answer and hits
        """
        items = data.get("results") or []
        return cls(
            answer=data.get("answer") or None,
            hits=[SearchHit.from_api(item) for item in items[:limit]],
        )

    def to_context(self) -> str:
        """Format as the context blob injected into the prompt."""
        answer = f"Answer: {self.answer}\n\n" if self.answer else ""
        results = "\n\n".join(hit.render() for hit in self.hits)
        return answer + results
