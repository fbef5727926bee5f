from ticketmarket.domain.entities import Ticket, TicketStatus


def can_transition_ticket(current: TicketStatus, new: TicketStatus) -> bool:
    """
    Determine if a ticket status transition is allowed.
    Invalidated is terminal.
    """
    if current == new:
        return True

    if current == TicketStatus.VALID:
        return new == TicketStatus.INVALIDATED

    return False


def transition_ticket(ticket: Ticket, new_status: TicketStatus) -> Ticket:
    """
    Return a NEW Ticket with the updated status.
    Raises ValueError if transition is invalid.
    """
    if ticket.status == new_status:
        return ticket.model_copy()

    if not can_transition_ticket(ticket.status, new_status):
        raise ValueError(f"Invalid transition from {ticket.status.value} to {new_status.value}")

    return ticket.model_copy(update={"status": new_status})
