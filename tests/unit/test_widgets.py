"""Unit tests for widget rendering."""

import pytest

from cc_statusline.config.schema import LimitsOptions, StatusLineConfig
from cc_statusline.types import (
    ContextUsage,
    FileChanges,
    GitStatus,
    RenderContext,
    UsageLimits,
    UsageWindow,
)
from cc_statusline.utils.colors import strip_ansi
from cc_statusline.widgets.builtin import git as git_widget_module
from cc_statusline.widgets.builtin.context import ContextWidget
from cc_statusline.widgets.builtin.directory import DirectoryWidget
from cc_statusline.widgets.builtin.git import GitBranchWidget
from cc_statusline.widgets.builtin.model import ModelWidget
from cc_statusline.widgets.builtin.separator import SeparatorWidget
from cc_statusline.widgets.builtin.usage import (
    FiveHourUsageWidget,
    SevenDayUsageWidget,
    render_usage_block,
)
from cc_statusline.widgets.registry import get_all_widgets, get_widget

PAST = "2020-01-01T00:00:00Z"


@pytest.fixture
def sample_context():
    """Create a sample render context for testing."""
    return RenderContext(
        data={
            "model": {"id": "claude-opus-4-5-20251101", "display_name": "Opus 4.5"},
            "workspace": {"current_dir": "/work/projects/app/src"},
            "session_id": "abc123-def456-789",
        },
        git_status=GitStatus(
            branch="main",
            has_changes=True,
            unstaged=FileChanges(added=4, deleted=2, files=1),
            is_git_repo=True,
        ),
        context_usage=ContextUsage(tokens=50000, max_tokens=200000, percentage=25),
        usage_limits=UsageLimits(
            five_hour=UsageWindow(utilization=42.0, resets_at=PAST),
            seven_day=UsageWindow(utilization=80.0, resets_at=PAST),
        ),
    )


@pytest.mark.unit
class TestRegistry:
    """Tests for widget registration."""

    def test_builtin_widgets_registered(self):
        widgets = get_all_widgets()
        for widget_type in (
            "git-branch",
            "directory",
            "model",
            "separator",
            "context",
            "usage-five-hour",
            "usage-seven-day",
        ):
            assert widget_type in widgets

    def test_metadata_from_decorator(self):
        widget = get_widget("directory")
        assert isinstance(widget, DirectoryWidget)
        assert widget.display_name == "Directory"
        assert widget.default_color == "light_gray"

    def test_unknown_widget(self):
        assert get_widget("does-not-exist") is None


@pytest.mark.unit
class TestModelWidget:
    """Tests for ModelWidget."""

    def test_renders_display_name(self, sample_context):
        assert ModelWidget().render(sample_context) == "Opus 4.5"

    def test_hides_sonnet_by_default(self, sample_context):
        sample_context.data["model"] = {"display_name": "Sonnet 4.5"}
        assert ModelWidget().render(sample_context) is None

    def test_shows_sonnet_when_enabled(self, sample_context):
        sample_context.data["model"] = {"display_name": "Sonnet 4.5"}
        sample_context.config = StatusLineConfig(show_sonnet_model=True)
        assert ModelWidget().render(sample_context) == "Sonnet 4.5"

    def test_falls_back_to_id(self, sample_context):
        sample_context.data["model"] = {"id": "claude-opus-4-5"}
        assert ModelWidget().render(sample_context) == "claude-opus-4-5"

    def test_missing_model(self, sample_context):
        del sample_context.data["model"]
        assert ModelWidget().render(sample_context) is None


@pytest.mark.unit
class TestDirectoryWidget:
    """Tests for DirectoryWidget."""

    def test_truncated_by_default(self, sample_context):
        assert DirectoryWidget().render(sample_context) == "/app/src"

    def test_basename_mode(self, sample_context):
        sample_context.config = StatusLineConfig(path_display_mode="basename")
        assert DirectoryWidget().render(sample_context) == "src"

    def test_falls_back_to_cwd(self, sample_context):
        sample_context.data = {"cwd": "/tmp/x"}
        assert DirectoryWidget().render(sample_context) == "/tmp/x"

    def test_no_directory(self, sample_context):
        sample_context.data = {}
        assert DirectoryWidget().render(sample_context) is None


@pytest.mark.unit
class TestGitBranchWidget:
    """Tests for GitBranchWidget."""

    def test_branch_with_changes(self, sample_context):
        result = GitBranchWidget().render(sample_context)
        assert strip_ansi(result) == "main • ~1"

    def test_hidden_outside_repository(self, sample_context):
        sample_context.git_status = GitStatus(is_git_repo=False)
        assert GitBranchWidget().render(sample_context) is None

    def test_fetches_status_when_missing(self, sample_context, monkeypatch):
        calls = []

        def fake_status(cwd):
            calls.append(cwd)
            return GitStatus(branch="feature", is_git_repo=True)

        monkeypatch.setattr(git_widget_module, "get_git_status", fake_status)
        sample_context.git_status = None

        assert GitBranchWidget().render(sample_context) == "feature"
        assert calls == ["/work/projects/app/src"]

    def test_empty_fragment_hidden(self, sample_context):
        sample_context.git_status = GitStatus(branch="main", is_git_repo=True)
        sample_context.config = StatusLineConfig(git={"showBranch": False})
        assert GitBranchWidget().render(sample_context) is None


@pytest.mark.unit
class TestSeparatorWidget:
    def test_uses_configured_glyph(self, sample_context):
        sample_context.config = StatusLineConfig(separator="|")
        assert SeparatorWidget().render(sample_context) == " | "


@pytest.mark.unit
class TestContextWidget:
    """Tests for ContextWidget."""

    def test_renders_usage(self, sample_context):
        assert strip_ansi(ContextWidget().render(sample_context)) == "Context: 50k 25%"

    def test_icon_labels(self, sample_context):
        sample_context.config = StatusLineConfig(use_icon_labels=True)
        assert strip_ansi(ContextWidget().render(sample_context)) == "📚 50k 25%"

    def test_no_usage(self, sample_context):
        sample_context.context_usage = None
        assert ContextWidget().render(sample_context) is None

    def test_everything_disabled(self, sample_context):
        sample_context.config = StatusLineConfig(
            session={"showTokens": False, "showPercentage": False}
        )
        assert ContextWidget().render(sample_context) is None


@pytest.mark.unit
class TestUsageWidgets:
    """Tests for the five-hour and seven-day usage blocks."""

    def test_five_hour_with_bar(self, sample_context):
        result = FiveHourUsageWidget().render(sample_context)
        assert strip_ansi(result) == "5h: ██░░░ 42% (now)"

    def test_five_hour_without_bar(self, sample_context):
        sample_context.config = StatusLineConfig(limits={"showProgressBar": False})
        result = FiveHourUsageWidget().render(sample_context)
        assert strip_ansi(result) == "5h: 42% (now)"

    def test_icon_label(self, sample_context):
        sample_context.config = StatusLineConfig(
            use_icon_labels=True, limits={"showProgressBar": False}
        )
        result = FiveHourUsageWidget().render(sample_context)
        assert strip_ansi(result) == "🕔 42% (now)"

    def test_seven_day_disabled_by_default(self, sample_context):
        assert SevenDayUsageWidget().render(sample_context) is None

    def test_seven_day_when_enabled(self, sample_context):
        sample_context.config = StatusLineConfig(
            limits={"showSevenDay": True, "progressBarLength": 10}
        )
        result = SevenDayUsageWidget().render(sample_context)
        assert strip_ansi(result) == "7d: ████████░░ 80% (now)"

    def test_hidden_without_limits(self, sample_context):
        sample_context.usage_limits = None
        assert FiveHourUsageWidget().render(sample_context) is None

    def test_hidden_without_reset_time(self):
        window = UsageWindow(utilization=10.0, resets_at=None)
        assert render_usage_block(window, "5h:", "🕔", StatusLineConfig()) is None

    def test_bar_uses_configured_length(self):
        config = StatusLineConfig(limits=LimitsOptions(progress_bar_length=15))
        window = UsageWindow(utilization=0.0, resets_at=PAST)
        result = strip_ansi(render_usage_block(window, "5h:", "🕔", config))
        assert result == "5h: " + "░" * 15 + " 0% (now)"
