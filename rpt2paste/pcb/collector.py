"""State machine collecting dispensable pads from report events."""
import logging
from typing import Iterable, Optional

from rpt2paste.config import DEFAULT_SCALE
from rpt2paste.errors import ProtocolError

from .models import (
    CollectorState, ComponentContext, ComponentEnd, ComponentStart, Drill,
    Event, Orientation, Pad, PadEnd, PadStart, Point, Position, Size
)
from .transform import orientation_to_radians, transform_pad_position

logger = logging.getLogger(__name__)


class PadCollector:
    """
    Consume component/pad events and keep the surface-mount pads.

    A Position or Orientation event describes the component while no pad is
    open and the pad otherwise. Pad positions are transformed into the
    global frame as soon as they are seen, using whatever component placement
    has been read so far. Through-hole pads (nonzero drill) are dropped when
    their pad closes.
    """

    def __init__(self, scale: float = DEFAULT_SCALE):
        """
        Initialize collector.

        Args:
            scale: Linear factor from report units to target units
        """
        self.scale = scale
        self._context: Optional[ComponentContext] = None
        self._current_pad: Optional[Pad] = None
        self._pads: list[Pad] = []
        self._components = 0
        self._seen_pads = 0
        self._discarded = 0

        self._handlers = {
            ComponentStart: self._on_component_start,
            ComponentEnd: self._on_component_end,
            PadStart: self._on_pad_start,
            PadEnd: self._on_pad_end,
            Position: self._on_position,
            Size: self._on_size,
            Drill: self._on_drill,
            Orientation: self._on_orientation,
        }

    @property
    def state(self) -> CollectorState:
        if self._current_pad is not None:
            return CollectorState.IN_PAD
        if self._context is not None:
            return CollectorState.IN_COMPONENT
        return CollectorState.IDLE

    @property
    def pads(self) -> list[Pad]:
        """Pads accepted so far."""
        return self._pads

    @property
    def component_count(self) -> int:
        """Number of components opened."""
        return self._components

    @property
    def seen_pad_count(self) -> int:
        """Number of completed pads, accepted or not."""
        return self._seen_pads

    @property
    def discarded_count(self) -> int:
        """Number of through-hole pads dropped."""
        return self._discarded

    def feed(self, event: Event) -> None:
        """Advance the state machine by one event."""
        handler = self._handlers.get(type(event))
        if handler is None:
            logger.debug("Ignoring unsupported event %r", event)
            return
        handler(event)

    def feed_all(self, events: Iterable[Event]) -> None:
        for event in events:
            self.feed(event)

    def finish(self) -> list[Pad]:
        """
        Close the event stream and return the accepted pads.

        Raises:
            ProtocolError: if a component or pad is still open
        """
        if self.state is not CollectorState.IDLE:
            raise ProtocolError(f"Report ended while {self.state.value.replace('_', ' ')}")
        logger.info(
            "Collected %d pads (%d through-hole discarded)",
            len(self._pads), self._discarded
        )
        return self._pads

    def _on_component_start(self, event: ComponentStart) -> None:
        if self._current_pad is not None:
            logger.debug("Ignoring component start inside pad %s", self._current_pad.pad_id)
            return
        if self._context is not None:
            raise ProtocolError(
                f"Component {event.reference!r} started before "
                f"{self._context.reference!r} ended"
            )
        self._context = ComponentContext(reference=event.reference)
        self._components += 1

    def _on_component_end(self, event: ComponentEnd) -> None:
        if self._current_pad is not None:
            logger.debug("Ignoring component end inside pad %s", self._current_pad.pad_id)
            return
        if self._context is None:
            logger.debug("Ignoring component end outside a component")
            return
        self._context = None

    def _on_pad_start(self, event: PadStart) -> None:
        if self._current_pad is not None:
            raise ProtocolError("Nested pad start")
        if self._context is None:
            raise ProtocolError("Pad started outside a component")
        self._current_pad = Pad(component=self._context.reference, name=event.name)

    def _on_pad_end(self, event: PadEnd) -> None:
        pad = self._current_pad
        if pad is None:
            raise ProtocolError("Pad end without pad start")

        self._seen_pads += 1
        if pad.is_through_hole:
            self._discarded += 1
            logger.debug("Discarding through-hole pad %s (drill %g)", pad.pad_id, pad.drill)
        else:
            self._pads.append(pad)
        self._current_pad = None

    def _on_position(self, event: Position) -> None:
        if self._current_pad is not None:
            self._current_pad.position = transform_pad_position(
                Point(event.x, event.y), self._context, self.scale
            )
        elif self._context is not None:
            # Scaling happens once, on the pad's final transform
            self._context.origin = Point(event.x, event.y)

    def _on_orientation(self, event: Orientation) -> None:
        # Pad orientations only rotate the pad shape, not its position
        if self._current_pad is None and self._context is not None:
            self._context.rotation = orientation_to_radians(event.angle)

    def _on_size(self, event: Size) -> None:
        if self._current_pad is None:
            return
        self._current_pad.area = event.width * event.height * self.scale * self.scale

    def _on_drill(self, event: Drill) -> None:
        if self._current_pad is None:
            logger.debug("Ignoring drill outside a pad")
            return
        self._current_pad.drill = event.diameter
