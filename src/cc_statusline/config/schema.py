"""Configuration schema using Pydantic for validation."""

from typing import Any, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator
from pydantic.alias_generators import to_camel

Separator = Literal["|", "•", "·", "⋅", "●", "◆", "▪", "▸", "›", "→"]
PathDisplayMode = Literal["full", "truncated", "basename"]
BarColor = Literal["progressive", "green", "yellow", "red", "blue"]
BarLength = Literal[5, 10, 15]

SEPARATORS: tuple[str, ...] = get_args(Separator)
PATH_DISPLAY_MODES: tuple[str, ...] = get_args(PathDisplayMode)
BAR_COLORS: tuple[str, ...] = get_args(BarColor)
BAR_LENGTHS: tuple[int, ...] = get_args(BarLength)


class _Section(BaseModel):
    """Shared settings: camelCase JSON keys, frozen, unknown keys kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class GitOptions(_Section):
    """Which git facets are shown on the first line."""

    show_branch: StrictBool = True
    show_dirty_indicator: StrictBool = True
    show_changes: StrictBool = False
    show_staged: StrictBool = True
    show_unstaged: StrictBool = True


class SessionOptions(_Section):
    """Token summary on the second line."""

    info_separator: Optional[Separator] = None
    show_tokens: StrictBool = True
    show_max_tokens: StrictBool = False
    show_token_decimals: StrictBool = False
    show_percentage: StrictBool = True


class ContextOptions(_Section):
    """Context window budget used to compute the usage percentage."""

    max_context_tokens: StrictInt = Field(default=200000, gt=0)
    autocompact_buffer_tokens: StrictInt = Field(default=45000, ge=0)
    use_usable_context_only: StrictBool = False
    overhead_tokens: StrictInt = Field(default=0, ge=0)


class LimitsOptions(_Section):
    """Usage-limit blocks and their progress bars."""

    show_progress_bar: StrictBool = True
    progress_bar_length: BarLength = 5
    color: BarColor = "blue"
    show_seven_day: StrictBool = False

    @field_validator("progress_bar_length", mode="before")
    @classmethod
    def _exact_bar_length(cls, value: Any) -> Any:
        # Literal validation would accept 10.0 or True; only real ints pass
        if type(value) is not int:
            raise ValueError(f"progressBarLength must be one of {BAR_LENGTHS}")
        return value


class StatusLineConfig(_Section):
    """Complete status line configuration."""

    one_line: StrictBool = False
    show_first_line: StrictBool = True
    show_sonnet_model: StrictBool = False
    path_display_mode: PathDisplayMode = "truncated"
    use_icon_labels: StrictBool = False
    separator: Separator = "•"
    git: GitOptions = Field(default_factory=GitOptions)
    session: SessionOptions = Field(default_factory=SessionOptions)
    context: ContextOptions = Field(default_factory=ContextOptions)
    limits: LimitsOptions = Field(default_factory=LimitsOptions)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready tree with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
