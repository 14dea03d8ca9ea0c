from __future__ import annotations
from typing import Any, Callable, Dict, Iterator, List, Optional


class LinkedPage:
    """
    One page of a collection whose body carries "<resource>_links"
    with an optional rel="next" entry.
    """

    resource_key = ""

    def __init__(self, url: str, body: Any, headers: Dict[str, str]) -> None:
        self.url = url
        self.body = body if isinstance(body, dict) else {}
        self.headers = headers

    def items(self) -> List[Dict[str, Any]]:
        return [i for i in (self.body.get(self.resource_key) or []) if isinstance(i, dict)]

    def is_empty(self) -> bool:
        return not self.items()

    def next_page_url(self) -> Optional[str]:
        for link in self.body.get(f"{self.resource_key}_links") or []:
            if isinstance(link, dict) and link.get("rel") == "next" and link.get("href"):
                return str(link["href"])
        return None


class Pager:
    """
    Lazy, restartable sequence of pages. Each iteration starts again at the
    initial URL and fetches one page per step.
    """

    def __init__(self, client, url: str, page_factory: Callable[[str, Any, Dict[str, str]], LinkedPage]) -> None:
        self.client = client
        self.url = url
        self.page_factory = page_factory

    def __iter__(self) -> Iterator[LinkedPage]:
        url: Optional[str] = self.url
        seen = set()
        while url and url not in seen:
            seen.add(url)
            body, headers = self.client.get(url)
            page = self.page_factory(url, body, headers)
            if page.is_empty():
                return
            yield page
            url = page.next_page_url()

    def all_pages(self) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for page in self:
            out.extend(page.items())
        return out
