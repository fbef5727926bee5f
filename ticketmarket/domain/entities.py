from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# --- Identity / Enums ---

Principal = str


class RoleType(str, Enum):
    ADMIN = "admin"
    ORGANIZER = "organizer"
    USER = "user"


class EventStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"


class TicketStatus(str, Enum):
    VALID = "valid"
    INVALIDATED = "invalidated"


# --- Events ---

class Event(BaseModel):
    event_id: int
    name: str
    date: int  # unix seconds
    venue: str
    price: int
    total_tickets: int
    available_tickets: int
    organizer: Principal
    status: EventStatus = EventStatus.ACTIVE
    description: str = ""
    image_url: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == EventStatus.ACTIVE

    @property
    def sold_tickets(self) -> int:
        return self.total_tickets - self.available_tickets


# --- Tickets ---

class TicketTransfer(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_principal: Principal = Field(alias="from")
    to: Principal
    price: int
    timestamp: int


class TicketMetadata(BaseModel):
    event_name: str
    ticket_class: str
    seat_info: str | None = None
    purchase_date: int


class Ticket(BaseModel):
    token_id: int
    event_id: int
    owner: Principal
    original_price: int
    current_price: int
    purchase_history: list[TicketTransfer] = Field(default_factory=list)
    status: TicketStatus = TicketStatus.VALID
    metadata: TicketMetadata | None = None

    @property
    def is_valid(self) -> bool:
        return self.status == TicketStatus.VALID

    @property
    def is_listed(self) -> bool:
        return self.current_price != self.original_price

    @property
    def last_transfer(self) -> TicketTransfer | None:
        return self.purchase_history[-1] if self.purchase_history else None


# --- Read projections ---

class TokenMetadata(BaseModel):
    token_id: int
    owner: Principal
    metadata_blob: bytes | None = None
    properties: list[tuple[str, str]] = Field(default_factory=list)
    is_approved: bool = False


class EventStats(BaseModel):
    total_sold: int
    total_revenue: int
    valid_tickets: int
