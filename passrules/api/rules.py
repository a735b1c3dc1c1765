from functools import lru_cache
import logging

from fastapi import APIRouter, Depends

from passrules.core.charsets.config import Charset
from passrules.core.replacement.config import Replacement
from passrules.core.replacement.prefix_dictionary import PrefixDictionary
from passrules.core.rules.composer import PasswordRule, build_rule
from passrules.core.rules.config import RuleConfig
from passrules.messages.rule_messages import (
    INVALID_RULE,
    PREFIX_DICTIONARY_UNAVAILABLE,
    RULE_APPLIED_SUCCESS,
    RULE_OPTIONS_SUCCESS,
    RULE_STEPS_SUCCESS,
)
from passrules.schemas.rules import (
    ApplyRuleData,
    ApplyRuleRequest,
    RuleOptionsData,
    RuleRequest,
    RuleStepsData,
    RuleStepsRequest,
)
from passrules.utils.exceptions import (
    BadRequestError,
    ResourceLoadError,
    ServerError,
    ValidationError,
)
from passrules.utils.response_builder import success_response

router = APIRouter(prefix="/api/rules", tags=["Password Rules"])
logger = logging.getLogger(__name__)


def get_prefixes() -> PrefixDictionary:
    try:
        return PrefixDictionary.shared()
    except ResourceLoadError as e:
        logger.error(f"❌ {e}")
        raise ServerError(
            code="PREFIX_DICTIONARY_UNAVAILABLE", message=PREFIX_DICTIONARY_UNAVAILABLE
        )


@lru_cache(maxsize=256)
def _cached_rule(config: RuleConfig, prefixes: PrefixDictionary) -> PasswordRule:
    return build_rule(config, prefixes)


def _rule(req: RuleRequest, prefixes: PrefixDictionary) -> PasswordRule:
    try:
        config = req.to_config()
    except ValidationError as e:
        logger.warning(f"Rejected rule configuration: {e}")
        raise BadRequestError(code="INVALID_RULE", message=f"{INVALID_RULE} {e}")
    return _cached_rule(config, prefixes)


@router.get("/options")
def rule_options():
    data = RuleOptionsData(
        charsets=[c.value for c in Charset],
        replacements=[r.value for r in Replacement],
    )
    return success_response(message=RULE_OPTIONS_SUCCESS, data=data)


@router.post("/apply")
def apply_rule(
    req: ApplyRuleRequest, prefixes: PrefixDictionary = Depends(get_prefixes)
):
    rule = _rule(req, prefixes)
    data = ApplyRuleData(
        rule=rule.config.label(), passwords=[rule(line) for line in req.lines]
    )
    return success_response(message=RULE_APPLIED_SUCCESS, data=data)


@router.post("/steps")
def rule_steps(
    req: RuleStepsRequest, prefixes: PrefixDictionary = Depends(get_prefixes)
):
    rule = _rule(req, prefixes)
    data = RuleStepsData(rule=rule.config.label(), steps=rule.steps(req.text))
    return success_response(message=RULE_STEPS_SUCCESS, data=data)
