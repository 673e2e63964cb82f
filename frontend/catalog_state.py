"""
Filter state of the catalog page.

Lives next to the Streamlit app so the page keeps its own state between reruns
and only asks the backend for results when the effective filter changed.
"""
import time
from typing import Callable, List, Optional, Tuple

DEBOUNCE_SECONDS = 0.3


class Debouncer:
    """
    Holds back a changing value until it has been stable for `delay` seconds.
    """

    def __init__(self, delay: float = DEBOUNCE_SECONDS, initial: str = "", clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self.clock = clock
        self._value = initial
        self._pending: Optional[str] = None
        self._last_input = 0.0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def push(self, value: str):
        self._pending = value
        self._last_input = self.clock()

    def remaining(self) -> float:
        if not self.pending:
            return 0.0
        return max(0.0, self.delay - (self.clock() - self._last_input))

    def poll(self) -> bool:
        """Promotes the pending value once it has settled. True when it changed."""
        if self.pending and self.remaining() == 0.0:
            changed = self._pending != self._value
            self._value = self._pending
            self._pending = None
            return changed
        return False

    def set_now(self, value: str):
        self._value = value
        self._pending = None

    @property
    def value(self) -> str:
        self.poll()
        return self._value


class CatalogBrowser:
    """
    Search text goes through a debouncer, the other filters apply at once.
    `fetch` receives the query parameters of GET /services and returns the
    decoded response (or an {"error": ...} dict).
    """

    def __init__(self, fetch: Callable[[dict], dict], clock: Callable[[], float] = time.monotonic):
        self.fetch = fetch
        self.search_text = ""
        self.price_range: Optional[str] = None
        self.selected_categories: List[str] = []
        self.selected_types: List[str] = []
        self._search = Debouncer(DEBOUNCE_SECONDS, clock=clock)
        self._last_params: Optional[dict] = None
        self._response: dict = {}

    # --- inputs ---
    def set_search_text(self, text: str):
        if text == self.search_text:
            return
        self.search_text = text
        self._search.push(text.lower())

    def set_price_range(self, label: Optional[str]):
        self.price_range = label or None

    def toggle_category(self, category: str, checked: bool):
        self.selected_categories = self._toggle(self.selected_categories, category, checked)

    def toggle_type(self, service_type: str, checked: bool):
        self.selected_types = self._toggle(self.selected_types, service_type, checked)

    @staticmethod
    def _toggle(selected: List[str], value: str, checked: bool) -> List[str]:
        if checked:
            return selected if value in selected else selected + [value]
        return [v for v in selected if v != value]

    def remove_filter(self, kind: str, value: str = None):
        if kind == "category" and value:
            self.toggle_category(value, False)
        elif kind == "type" and value:
            self.toggle_type(value, False)
        elif kind == "price":
            self.price_range = None
        elif kind == "search":
            self.search_text = ""
            self._search.set_now("")

    def reset_filters(self):
        self.search_text = ""
        self._search.set_now("")
        self.price_range = None
        self.selected_categories = []
        self.selected_types = []

    # --- state ---
    @property
    def debounced_search(self) -> str:
        return self._search.value

    @property
    def has_active_filters(self) -> bool:
        return bool(self.search_text or self.price_range or self.selected_categories or self.selected_types)

    def active_filters(self) -> List[Tuple[str, Optional[str], str]]:
        """(kind, value, tag label) for every filter the user can remove."""
        tags = [("category", c, c) for c in self.selected_categories]
        tags += [("type", t, t) for t in self.selected_types]
        if self.price_range:
            tags.append(("price", None, f"Precio: {self.price_range}"))
        if self.search_text:
            tags.append(("search", None, f"Búsqueda: {self.search_text}"))
        return tags

    def query_params(self) -> dict:
        params = {
            "q": self.debounced_search,
            "category": list(self.selected_categories),
            "type": list(self.selected_types),
        }
        if self.price_range:
            params["price_range"] = self.price_range
        return params

    def results(self) -> List[dict]:
        params = self.query_params()
        if params != self._last_params:
            self._response = self.fetch(params)
            # Failed calls are retried on the next rerun
            self._last_params = None if "error" in self._response else params
        return self._response.get("services", [])

    @property
    def error(self) -> Optional[str]:
        return self._response.get("error")

    @property
    def message(self) -> Optional[str]:
        return self._response.get("message")
