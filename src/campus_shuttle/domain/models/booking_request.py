"""Booking request domain model."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .itinerary import Itinerary


class BookingStatus(str, Enum):
    """Lifecycle states of a persisted booking."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class BookingRequest(BaseModel):
    """A selected itinerary reduced to what the booking collaborator persists."""

    model_config = ConfigDict(frozen=True)

    route_id: str
    start_stop_id: str
    end_stop_id: str
    points_deducted: int = Field(ge=0)
    second_route_id: str | None = None
    transfer_point_id: str | None = None
    total_wait_time: int | None = None
    status: BookingStatus = BookingStatus.PENDING
    scheduled_time: datetime | None = None

    @classmethod
    def from_itinerary(
        cls,
        itinerary: Itinerary,
        points_deducted: int,
        scheduled_time: datetime | None = None,
    ) -> "BookingRequest":
        """Build a booking request from a selected itinerary.

        Transfer fields are only populated for transfer itineraries. The
        transfer point id is recorded only when that point's wait time was
        applied, so it stays empty for joins at unregistered stops and for
        any-stop transfers that merely pass a registered point.
        """
        transfer_point_id: str | None = None
        total_wait_time: int | None = None
        if itinerary.is_transfer:
            transfer_point = itinerary.transfer_point
            if (
                transfer_point is not None
                and transfer_point.wait_time == itinerary.wait_time_minutes
            ):
                transfer_point_id = transfer_point.id
            total_wait_time = itinerary.wait_time_minutes

        return cls(
            route_id=itinerary.route.id,
            start_stop_id=itinerary.origin.id,
            end_stop_id=itinerary.destination.id,
            points_deducted=points_deducted,
            second_route_id=itinerary.second_route.id if itinerary.second_route else None,
            transfer_point_id=transfer_point_id,
            total_wait_time=total_wait_time,
            scheduled_time=scheduled_time,
        )
