# ABOUTME: Extracts extant breed names from the wikitext of Wikipedia's "List of dog breeds"
# ABOUTME: Pure regex extraction plus a thin fetch wrapper around the MediaWiki parse API

import re

from dog_breeds.config import get_config
from dog_breeds.core.models import ExtractedBreeds
from dog_breeds.extraction.base import FetchJSON
from dog_breeds.utils.logging import get_logger, log_pipeline_step

logger = get_logger(__name__)

EXTINCT_SECTION_MARKER = "== Extinct"

# * [[Article Title]] or * [[Article Title|Display Name]]
BREED_LINK_PATTERN = re.compile(r"\*\s*\[\[([^\]|]+?)(?:\|([^\]]+?))?\]\]")


def parse_breed_list_wikitext(wikitext: str) -> ExtractedBreeds:
    """Parse article titles and display names from breed list wikitext.

    Only bullet links before the extinct breeds section are considered; when
    that section is missing the whole text is used. Repeated article titles
    keep their first display name. Links with a blank title are skipped and a
    blank display name falls back to the title.

    Args:
        wikitext: Raw wikitext of the breed list page

    Returns:
        Mapping of article title to display name, in page order
    """
    extinct_index = wikitext.find(EXTINCT_SECTION_MARKER)
    extant_text = wikitext[:extinct_index] if extinct_index != -1 else wikitext

    breeds: ExtractedBreeds = {}
    for match in BREED_LINK_PATTERN.finditer(extant_text):
        article_title = match.group(1).strip()
        if not article_title:
            continue
        display_name = (match.group(2) or "").strip() or article_title
        breeds.setdefault(article_title, display_name)

    return breeds


@log_pipeline_step("fetch_breed_list")
async def fetch_breed_list(fetch: FetchJSON, api_url: str | None = None, page: str | None = None) -> ExtractedBreeds:
    """Fetch the breed list page wikitext and extract its extant breeds."""
    config = get_config()
    params = {
        "action": "parse",
        "page": page or config.breed_list_page,
        "prop": "wikitext",
        "format": "json",
    }

    data = await fetch(api_url or config.wikipedia_api_url, params)
    breeds = parse_breed_list_wikitext(data["parse"]["wikitext"]["*"])

    logger.info("Extracted extant breeds from Wikipedia", breed_count=len(breeds), page=params["page"])
    return breeds
