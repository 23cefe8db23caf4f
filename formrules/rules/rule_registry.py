"""Rule registry: central lookup of available field rules by ID.

Form layers reference rules by ID string rather than importing functions
directly. Each rule takes the field value and returns True (accept) or
False (reject).
"""

from collections.abc import Callable

from formrules.config import IMAGE_RULE_ID
from formrules.rules.image_rules import image_validator

RULE_REGISTRY: dict[str, Callable[..., bool]] = {
    IMAGE_RULE_ID: image_validator,
}


def get_rule(rule_id: str) -> Callable[..., bool]:
    try:
        return RULE_REGISTRY[rule_id]
    except KeyError:
        raise KeyError(
            f"Unknown rule '{rule_id}'. Must be one of: {', '.join(sorted(RULE_REGISTRY))}"
        ) from None
