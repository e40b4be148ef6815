"""Value types shared by the matcher, hunk builder and context pruner"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Operation(str, Enum):
    """Restrict the fate of a line to a closed set of operations"""
    unchanged = "unchanged"
    insert = "insert"
    delete = "delete"


class EditTag(str, Enum):
    """Kinds of run in the matcher's edit script"""
    equal = "equal"
    delete = "delete"
    insert = "insert"
    replace = "replace"        # paired delete/insert steps, equal length on both sides


class Hunk(BaseModel):
    """A single line's fate and its position.

    line_num indexes the original sequence for unchanged and delete hunks,
    and the modified sequence for insert hunks.
    """
    model_config = ConfigDict(frozen=True)

    operation: Operation
    line_num: int
    line: str


@dataclass(frozen=True)
class Edit:
    """One run of the internal edit script; not exposed to callers."""
    tag:  EditTag
    old:  tuple[str, ...]      # lines consumed from the original side
    new:  tuple[str, ...]      # lines consumed from the modified side
