"""
Lazy image loading.

A ``LazyImageLoader`` shows a fixed-size placeholder until its element comes
within ``margin`` pixels of the viewport, then switches to the real image.
The switch happens at most once: PENDING -> LOADED is irreversible, and the
loader stops observing its element as soon as it fires.

Visibility is reported by a ``VisibilityObserver``. In the browser this is the
IntersectionObserver wired up by ``assets/lazy_image.js``; ``ViewportObserver``
is the in-process equivalent working on plain rectangles.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, Mapping, NamedTuple, Optional, Protocol

from dash import html

from petgallery.configs.logging_init import logger

PLACEHOLDER_BACKGROUND = "#f0f0f0"
PLACEHOLDER_TEXT = "Loading..."

IntersectionCallback = Callable[[bool], Any]


class LoadState(str, Enum):
    PENDING = "pending"
    LOADED = "loaded"


class VisibilityObserver(Protocol):
    def observe(self, element_id: str, callback: IntersectionCallback, margin: int) -> None: ...

    def unobserve(self, element_id: str) -> None: ...


class Rect(NamedTuple):
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def expand(self, margin: float) -> "Rect":
        return Rect(
            self.left - margin, self.top - margin, self.width + 2 * margin, self.height + 2 * margin
        )

    def intersects(self, other: "Rect") -> bool:
        # Touching edges count, like IntersectionObserver with threshold 0
        return (
            self.left <= other.right
            and other.left <= self.right
            and self.top <= other.bottom
            and other.top <= self.bottom
        )


class ViewportObserver:
    """
    Track observed elements against a viewport grown by each element's margin.

    Callbacks fire when an element's intersection state changes, including the
    first ``update`` after it starts being observed.
    """

    def __init__(self):
        self._targets: dict[str, tuple[IntersectionCallback, int]] = {}
        self._last: dict[str, bool] = {}

    @property
    def observed(self) -> set[str]:
        return set(self._targets)

    def observe(self, element_id: str, callback: IntersectionCallback, margin: int = 0) -> None:
        self._targets[element_id] = (callback, margin)
        self._last.pop(element_id, None)

    def unobserve(self, element_id: str) -> None:
        self._targets.pop(element_id, None)
        self._last.pop(element_id, None)

    def update(self, viewport: Rect, rects: Mapping[str, Rect]) -> list[str]:
        """
        Report element positions relative to ``viewport``.

        Args:
            viewport: Visible area of the scroll container
            rects: Current bounding boxes keyed by element id; observed
                elements missing from the mapping are skipped

        Returns:
            Ids of the elements whose callback fired
        """
        fired = []
        # Callbacks may unobserve, so iterate over a snapshot
        for element_id, (callback, margin) in list(self._targets.items()):
            rect = rects.get(element_id)
            if rect is None or element_id not in self._targets:
                continue
            intersecting = viewport.expand(margin).intersects(rect)
            if self._last.get(element_id) == intersecting:
                continue
            self._last[element_id] = intersecting
            callback(intersecting)
            fired.append(element_id)
        return fired


class LazyImageLoader:
    def __init__(
        self,
        element_id: str,
        src: str,
        alt: str = "",
        height: int = 200,
        margin: int = 100,
        state: LoadState = LoadState.PENDING,
    ):
        self.element_id = element_id
        self.src = src
        self.alt = alt
        self.height = height
        self.margin = margin
        self._state = LoadState(state)
        self._observer: Optional[VisibilityObserver] = None
        self._released = False

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is LoadState.LOADED

    @property
    def is_observing(self) -> bool:
        return self._observer is not None

    def attach(self, observer: VisibilityObserver) -> None:
        """Start watching the element; a loaded or released loader has nothing to watch."""
        if self._released or self.is_loaded or self._observer is not None:
            return
        self._observer = observer
        observer.observe(self.element_id, self.on_intersection, self.margin)

    def on_intersection(self, is_intersecting: bool) -> bool:
        """
        Handle a visibility report for the element.

        Returns:
            True when this report moved the loader to LOADED
        """
        if not is_intersecting or self.is_loaded or self._released:
            return False
        self._state = LoadState.LOADED
        self._stop_observing()
        logger.debug(f"Lazy image {self.element_id} entered the viewport, loading {self.src}")
        return True

    def detach(self) -> None:
        """Release the observer; called on unmount whether or not the image loaded."""
        self._stop_observing()
        self._released = True

    def _stop_observing(self) -> None:
        if self._observer is not None:
            self._observer.unobserve(self.element_id)
            self._observer = None

    @contextmanager
    def attached(self, observer: VisibilityObserver) -> Iterator["LazyImageLoader"]:
        """Observe for the duration of the block, i.e. while the element is mounted."""
        self.attach(observer)
        try:
            yield self
        finally:
            self.detach()

    # ------------------------------------------------------------------
    # Rendering and (de)serialisation for dcc.Store
    # ------------------------------------------------------------------

    @property
    def _box_style(self) -> dict[str, Any]:
        return {
            "width": "100%",
            "height": f"{self.height}px",
            "objectFit": "cover",
            "borderRadius": "4px",
        }

    def render_content(self) -> html.Img | html.Div:
        if self.is_loaded:
            return html.Img(src=self.src, alt=self.alt, style={**self._box_style, "display": "block"})
        return html.Div(
            PLACEHOLDER_TEXT,
            className="lazy-image-placeholder",
            style={
                **self._box_style,
                "display": "flex",
                "alignItems": "center",
                "justifyContent": "center",
            },
        )

    def render(self) -> html.Div:
        return html.Div(
            self.render_content(),
            id={"type": "lazy-image", "index": self.element_id},
            className="lazy-image",
            style={**self._box_style, "backgroundColor": PLACEHOLDER_BACKGROUND},
            **{"data-margin": str(self.margin)},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "element_id": self.element_id,
            "src": self.src,
            "alt": self.alt,
            "height": self.height,
            "margin": self.margin,
            "state": self._state.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LazyImageLoader":
        return cls(
            element_id=data["element_id"],
            src=data["src"],
            alt=data.get("alt", ""),
            height=data.get("height", 200),
            margin=data.get("margin", 100),
            state=LoadState(data.get("state", LoadState.PENDING.value)),
        )
