"""Rule set endpoints."""

from fastapi import APIRouter

from configurator.domain.rules import RULE_SET
from configurator.web.routers.validate import rule_to_schema
from configurator.web.schemas.responses import RuleListSchema

router = APIRouter(prefix="/rules", tags=["rules"])


@router.get("", response_model=RuleListSchema)
async def list_rules() -> RuleListSchema:
    """List the rule set in evaluation order."""
    return RuleListSchema(rules=[rule_to_schema(rule) for rule in RULE_SET])
