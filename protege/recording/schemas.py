"""
Pydantic schemas for recorded demonstrations and their refinement results
"""

from typing import List, Optional, Dict, Mapping, Union, FrozenSet
from types import MappingProxyType
from enum import Enum
from datetime import datetime
from pydantic import BaseModel, Field, StrictBool, StrictStr, field_serializer, field_validator


class ActionKind(str, Enum):
    """Kind of UI interaction captured during teach mode"""
    CLICK = "click"
    INPUT = "input"
    TOGGLE = "toggle"


class RecordedAction(BaseModel):
    """Single event in a raw action log"""
    kind: ActionKind = Field(..., description="Interaction kind: 'click', 'input' or 'toggle'")
    target: str = Field(..., description="Identifier of the UI element acted upon (e.g., 'task-1', 'email')")
    value: Optional[Union[StrictBool, StrictStr]] = Field(
        None,
        description="Boolean for toggles, string for inputs, absent for clicks"
    )
    timestamp: int = Field(..., description="Capture order, non-decreasing across the log")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "kind": "input",
                "target": "email",
                "value": "user@example.com",
                "timestamp": 3
            }
        }

    def carries_valid_value(self) -> bool:
        """True for toggles holding a bool and inputs holding a string"""
        if self.kind == ActionKind.TOGGLE:
            return isinstance(self.value, bool)
        if self.kind == ActionKind.INPUT:
            return isinstance(self.value, str)
        return False

    def key(self) -> tuple:
        """Membership key used to match an action back to the raw log"""
        return (self.timestamp, self.target)


class TerminalState(BaseModel):
    """Deduced goal: the final configuration the user was working toward"""
    completed_targets: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Task-like targets whose latest toggle value is True"
    )
    field_values: Mapping[str, str] = Field(
        default_factory=dict,
        validate_default=True,
        description="Latest filtered input value per target, empty results excluded (read-only)"
    )
    captured_at: str = Field(default_factory=lambda: datetime.now().isoformat())

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "completed_targets": ["task-1"],
                "field_values": {"email": "user@example.com", "prospectName": "Sarah"},
                "captured_at": "2025-01-15T10:30:00"
            }
        }

    @field_validator("field_values", mode="after")
    @classmethod
    def _read_only_values(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("field_values")
    def _serialize_values(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)

    def necessary_targets(self) -> FrozenSet[str]:
        """Targets that contribute to the goal"""
        return self.completed_targets | frozenset(self.field_values)

    def is_empty(self) -> bool:
        return not self.completed_targets and not self.field_values


class RefinementReport(BaseModel):
    """Outcome of refining one teaching session"""
    raw_count: int = Field(..., description="Number of actions in the raw log")
    refined_count: int = Field(..., description="Number of actions in the refined script")
    goal: TerminalState = Field(..., description="Goal deduced from the raw log")
    refined_script: List[RecordedAction] = Field(default_factory=list, description="Refined, replayable actions")
    description: str = Field("No actions recorded", description="One-line summary of the refined script")

    @property
    def removed_count(self) -> int:
        return self.raw_count - self.refined_count

    def print_summary(self):
        """Print formatted refinement summary"""
        print("\n" + "="*80)
        print("RECORDING REFINEMENT SUMMARY")
        print("="*80)
        print(f"Goal captured at: {self.goal.captured_at}")
        print(f"Raw actions:      {self.raw_count}")
        print(f"Refined actions:  {self.refined_count}")
        if self.removed_count > 0:
            print(f"Noise removed:    {self.removed_count}")
        print(f"Task:             {self.description}")

        print("\n" + "-"*80)
        print("DEDUCED GOAL")
        print("-"*80)
        for target in sorted(self.goal.completed_targets):
            print(f"{target:20} | completed")
        for target, value in self.goal.field_values.items():
            display_value = value if len(value) < 50 else value[:47] + "..."
            print(f"{target:20} | {display_value}")

        print("="*80 + "\n")
