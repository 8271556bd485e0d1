# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import logging
import uuid
from typing import List
from typing import Optional

from pydantic import ConfigDict, Field, computed_field

from wi_ingest.internal.enums.common import ConversionOutcomeEnum
from wi_ingest.internal.schemas.meta.base_model_noext import BaseModelNoExt

logger = logging.getLogger(__name__)


# Field aliases keep the persisted JSON layout of conversion results stable.
class WorkInstructionTextItem(BaseModelNoExt):
    """
    Schema for a single extracted instruction: either a line of instruction text or an embedded image.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    work_instruction_item_id: uuid.UUID = Field(default_factory=uuid.uuid4, alias="WorkInstructionItemId")
    """Freshly generated identity of the item."""

    group_name: str = Field("", alias="GroupName")
    """Logical section label shared by every item extracted from the same table."""

    text: str = Field(..., alias="Text")
    """Instruction text, or the base64 encoding of an image payload."""

    sub_text: Optional[str] = Field(None, alias="SubText")
    """Reserved; never populated by extraction."""

    def with_group_name(self, group_name: str) -> "WorkInstructionTextItem":
        """Return a copy of the item tagged with ``group_name``."""
        return self.model_copy(update={"group_name": group_name})


class WorkInstruction(BaseModelNoExt):
    """
    Schema for the ordered instructions extracted from one document.
    """

    model_config = ConfigDict(populate_by_name=True)

    instructions_as_text: List[WorkInstructionTextItem] = Field(default_factory=list, alias="InstructionsAsText")
    source_filename: Optional[str] = Field(None, alias="SourceFilename")


class RuleViolation(BaseModelNoExt):
    """
    Schema for a rule violated during conversion. Critical violations abort the conversion.
    """

    model_config = ConfigDict(populate_by_name=True)

    rule: str = Field(..., alias="Rule")
    message: str = Field(..., alias="Message")
    is_critical: bool = Field(False, alias="IsCritical")


class ConversionResult(BaseModelNoExt):
    """
    Schema for the outcome of converting one document.

    ``aborted`` and ``has_rule_violations`` are derived from the recorded rule violations and are included
    when the result is serialized.
    """

    model_config = ConfigDict(populate_by_name=True)

    filename: Optional[str] = Field(None, alias="Filename")
    conversion_score: int = Field(0, alias="ConversionScore")
    rule_violations: List[RuleViolation] = Field(default_factory=list, alias="RuleViolations")
    work_instructions: WorkInstruction = Field(default_factory=WorkInstruction, alias="WorkInstructions")

    @computed_field(alias="Aborted")
    @property
    def aborted(self) -> bool:
        return any(violation.is_critical for violation in self.rule_violations)

    @computed_field(alias="HasRuleViolations")
    @property
    def has_rule_violations(self) -> bool:
        return len(self.rule_violations) > 0

    @property
    def outcome(self) -> ConversionOutcomeEnum:
        """The category the result is filed under."""
        if self.aborted:
            return ConversionOutcomeEnum.ABORTED
        if self.has_rule_violations:
            return ConversionOutcomeEnum.SUCCESS_WITH_WARNINGS
        return ConversionOutcomeEnum.SUCCESS

    def add_rule_violation(self, rule_name: str, abort: bool, warning_text: str) -> None:
        """
        Record a rule violation.

        Parameters
        ----------
        rule_name : str
            Name of the violated rule.
        abort : bool
            Whether the violation is critical.
        warning_text : str
            Human-readable description of the violation.
        """
        self.rule_violations.append(RuleViolation(rule=rule_name, message=warning_text, is_critical=abort))

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the result using the persisted field names."""
        return self.model_dump_json(by_alias=True, indent=indent)
