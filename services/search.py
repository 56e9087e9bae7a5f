"""
Web search service using the Tavily Search API.
"""
import httpx

from config import Config
from models.chat_models import SearchResult
from utils.constants import SearchTriggers
from utils.logger import app_logger


class SearchService:
    """Service for deciding when to search and fetching web context."""

    def __init__(self, config: Config, client: httpx.AsyncClient):
        """
        Initialize SearchService.

        Args:
            config: Application configuration holding the Tavily key
            client: Shared HTTP client used for the search request
        """
        self.config = config
        self.client = client

    @staticmethod
    def should_search(message: str | None) -> bool:
        """Detect whether a message likely needs live web data."""
        if not message:
            return False

        text = message.lower()
        return any(keyword in text for keyword in SearchTriggers.KEYWORDS)

    def _get_search_payload(self, query: str) -> dict:
        return {
            "api_key": self.config.tavily_api_key,
            "query": query,
            "search_depth": self.config.search_depth,
            "max_results": self.config.search_max_results,
            "include_answer": True,
        }

    async def search(self, query: str) -> str:
        """
        Search the web and format the top results as prompt context.
        Failures are logged and degrade to an empty context.

        Args:
            query: Search query string (the user's message)

        Returns:
            Formatted context blob, or "" when disabled or on any failure
        """
        if not self.config.search_enabled:
            return ""

        app_logger.info(f"Tavily search for: {query}")

        try:
            response = await self.client.post(
                self.config.tavily_search_url,
                json=self._get_search_payload(query),
            )

            if not response.is_success:
                app_logger.error(f"Tavily error (status {response.status_code}): {response.text}")
                return ""

            result = SearchResult.from_api(response.json(), self.config.search_display_results)
            app_logger.info(f"Tavily returned {len(result.hits)} results (answer: {'yes' if result.answer else 'no'})")
            return result.to_context()

        except httpx.TimeoutException as e:
            app_logger.error(f"Tavily search timed out: {str(e)}")
            return ""
        except httpx.RequestError as e:
            app_logger.error(f"Tavily search request failed: {str(e)}")
            return ""
        except Exception as e:
            app_logger.error(f"Tavily search failed: {str(e)}")
            return ""
