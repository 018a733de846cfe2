"""
Docs Service
============
Entry point of the documentation fetch tool.

Flow:
    1. Build candidate paths from the catalog
    2. Fetch candidates in order until one returns a page
    3. Render the live page, or the not-found template

Any unexpected failure along the way is logged and converted to the error
template. Nothing raised by the transport reaches the caller.
"""
import logging
from typing import Optional

from appledev.services.docs_catalog import candidate_paths
from appledev.services.docs_client import AppleDocsClient
from appledev.services.docs_renderer import format_error, format_live_doc, format_not_found

logger = logging.getLogger(__name__)


async def fetch_docs(
    query: str,
    framework: Optional[str] = None,
    include_examples: bool = True,
    client: Optional[AppleDocsClient] = None,
) -> str:
    """
    Fetch live Apple documentation for a query.

    Parameters
    ----------
    query : str
        API, framework or symbol name (e.g. "NavigationStack", "@Observable").
    framework : str | None
        Optional framework to search within (e.g. "SwiftUI").
    include_examples : bool
        Whether to append the page's code listings.
    client : AppleDocsClient | None
        Injected client; a fresh one is opened and closed when omitted.

    Returns
    -------
    str
        Markdown documentation, or a templated fallback. Never raises.
    """
    owns_client = client is None
    docs_client = client or AppleDocsClient()

    try:
        for doc_path in candidate_paths(query, framework):
            page = await docs_client.fetch_page(doc_path)
            if page is not None:
                logger.info("Live docs for %r resolved at %s", query, doc_path)
                return format_live_doc(page, query, include_examples)

        logger.info("No live docs found for %r (framework=%s)", query, framework)
        return format_not_found(query, framework)

    except Exception as e:
        logger.warning("Docs lookup failed for %r: %s", query, e, exc_info=True)
        return format_error(query)

    finally:
        if owns_client:
            await docs_client.close()
