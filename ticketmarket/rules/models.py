from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str = "ticket-marketplace"
    rules_version: str = "1"


class PricingRules(BaseModel):
    max_resale_multiplier: float = Field(default=1.2, gt=0)
    platform_fee_percentage: int = Field(default=2, ge=0, le=100)


class TicketRules(BaseModel):
    default_class: str = "Standard"


class RbacRules(BaseModel):
    roles: dict[str, list[str]] = Field(
        default_factory=lambda: {
            "admin": ["*"],
            "organizer": ["events:create"],
            "user": ["events:create"],
        }
    )


class AuditRules(BaseModel):
    enabled: bool = True


class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    pricing: PricingRules = Field(default_factory=PricingRules)
    tickets: TicketRules = Field(default_factory=TicketRules)
    rbac: RbacRules = Field(default_factory=RbacRules)
    audit: AuditRules = Field(default_factory=AuditRules)
