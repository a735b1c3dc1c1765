from typing import List
from pydantic import BaseModel, Field

from passrules.core.rules.config import RuleConfig


class RuleRequest(BaseModel):
    charset: str = "ascii"
    replacement: str = "none"
    word: str = "every"
    positions: str = "1st"
    add_spaces: bool = False

    def to_config(self) -> RuleConfig:
        return RuleConfig.parse(
            self.charset, self.replacement, self.word, self.positions, self.add_spaces
        )


class ApplyRuleRequest(RuleRequest):
    lines: List[str] = Field(default_factory=list)


class ApplyRuleData(BaseModel):
    rule: str
    passwords: List[str]


class RuleStepsRequest(RuleRequest):
    text: str


class RuleStepsData(BaseModel):
    rule: str
    steps: List[str]


class RuleOptionsData(BaseModel):
    charsets: List[str]
    replacements: List[str]
