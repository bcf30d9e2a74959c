from enum import Enum
from typing import Annotated, ClassVar, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class FileStatus(str, Enum):
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"


class LineType(str, Enum):
    CONTEXT = "context"
    ADDED = "added"
    DELETED = "deleted"


class DiffKind(str, Enum):
    STAGED = "staged"
    UNSTAGED = "unstaged"
    ALL = "all"


class DiffModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ContextLine(DiffModel):
    marker: ClassVar[str] = " "

    type: Literal["context"] = "context"
    content: str
    old_number: int
    new_number: int

    def render(self) -> str:
        return f"{self.marker}{self.content}"


class AddedLine(DiffModel):
    marker: ClassVar[str] = "+"

    type: Literal["added"] = "added"
    content: str
    new_number: int

    @property
    def old_number(self) -> None:
        return None

    def render(self) -> str:
        return f"{self.marker}{self.content}"


class DeletedLine(DiffModel):
    marker: ClassVar[str] = "-"

    type: Literal["deleted"] = "deleted"
    content: str
    old_number: int

    @property
    def new_number(self) -> None:
        return None

    def render(self) -> str:
        return f"{self.marker}{self.content}"


Line = Annotated[Union[ContextLine, AddedLine, DeletedLine], Field(discriminator="type")]


class Hunk(DiffModel):
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str
    lines: list[Line] = Field(default_factory=list)

    def render_body(self) -> str:
        """Rebuild the hunk body from the stored lines, one per row."""
        return "".join(f"{line.render()}\n" for line in self.lines)


class FileChange(DiffModel):
    old_path: str = ""
    path: str = ""
    status: FileStatus = FileStatus.MODIFIED
    is_binary: bool = False
    hunks: list[Hunk] = Field(default_factory=list)

    @computed_field
    @property
    def additions(self) -> int:
        return sum(1 for hunk in self.hunks for line in hunk.lines if line.type == LineType.ADDED)

    @computed_field
    @property
    def deletions(self) -> int:
        return sum(1 for hunk in self.hunks for line in hunk.lines if line.type == LineType.DELETED)


class DiffResult(DiffModel):
    files: list[FileChange] = Field(default_factory=list)
    type: DiffKind = DiffKind.ALL
