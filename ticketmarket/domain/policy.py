from ticketmarket.domain.entities import Event, Principal, RoleType
from ticketmarket.rules.models import Rules


class PolicyEngine:
    def __init__(self, rules: Rules, platform_owner: Principal):
        self.rules = rules
        self.platform_owner = platform_owner

    def check_permission(self, role: RoleType, action: str) -> bool:
        """
        Check if the role is allowed to perform the action.

        Supports "*" and scoped wildcards ("events:*" matches "events:create").
        """
        allowed_actions = self.rules.rbac.roles.get(role.value, [])
        if "*" in allowed_actions:
            return True
        if action in allowed_actions:
            return True

        if ":" in action:
            scope = action.split(":")[0]
            if f"{scope}:*" in allowed_actions:
                return True

        return False

    def can_create_event(self, role: RoleType) -> bool:
        return self.check_permission(role, "events:create")

    def can_manage_event(self, caller: Principal, role: RoleType, event: Event) -> bool:
        """Organizer of the event, or any Admin."""
        return caller == event.organizer or role == RoleType.ADMIN

    def can_invalidate_ticket(self, caller: Principal, event: Event) -> bool:
        # Not role based: Admins other than the platform owner are excluded
        return caller == event.organizer or caller == self.platform_owner

    def can_assign_roles(self, role: RoleType) -> bool:
        return role == RoleType.ADMIN
