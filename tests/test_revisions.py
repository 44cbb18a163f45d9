"""Tests for revision naming, allocation and selectors."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from savevers.config import SaveversConfig
from savevers.core.revisions import (
    RevisionError,
    allocate_slot,
    format_extension,
    is_count,
    is_revision_file,
    list_revisions,
    next_free_slot,
    parse_selector,
    resolve_target,
    revision_path,
)
from savevers.models import SelectorKind


class TestFormatExtension:
    """Tests for format_extension function."""

    @pytest.mark.unit
    def test_zero_pads_slot(self) -> None:
        """Slot is zero-padded to the given width."""
        assert format_extension(7, 4, ".clean") == ".0007.clean"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("slot", "width", "suffix"),
        [(1, 1, ".bak"), (42, 4, ".clean"), (9999, 4, ""), (123, 5, ".orig")],
    )
    def test_length_is_fixed(self, slot: int, width: int, suffix: str) -> None:
        """Extension length is 1 + width + len(suffix)."""
        ext = format_extension(slot, width, suffix)
        assert len(ext) == 1 + width + len(suffix)
        assert ext.startswith(".")
        assert ext[1 : 1 + width] == str(slot).zfill(width)

    @pytest.mark.unit
    def test_revision_path_appends_extension(
        self, base_file: Path, config: SaveversConfig
    ) -> None:
        """revision_path appends the extension to the full file name."""
        path = revision_path(base_file, 3, config.versions)
        assert path.name == "notes.txt.0003.clean"
        assert path.parent == base_file.parent


class TestIsRevisionFile:
    """Tests for is_revision_file function."""

    @pytest.mark.unit
    def test_recognizes_revision(self, config: SaveversConfig) -> None:
        """Revision names are recognized."""
        assert is_revision_file(Path("notes.txt.0012.clean"), config.versions)

    @pytest.mark.unit
    def test_rejects_plain_file(self, config: SaveversConfig) -> None:
        """Plain files and wrong widths are not revisions."""
        assert not is_revision_file(Path("notes.txt"), config.versions)
        assert not is_revision_file(Path("notes.txt.12.clean"), config.versions)


class TestAllocateSlot:
    """Tests for allocate_slot function."""

    @pytest.mark.unit
    def test_empty_directory_returns_slot_1(
        self, base_file: Path, config: SaveversConfig, small_config: SaveversConfig
    ) -> None:
        """With no revisions, slot 1 is allocated regardless of max_version."""
        assert allocate_slot(base_file, config.versions) == (".0001.clean", 1)
        assert allocate_slot(base_file, small_config.versions) == (".1.clean", 1)

    @pytest.mark.unit
    def test_appends_after_contiguous_revisions(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """With slots 1-3 taken, slot 4 is allocated."""
        make_revisions(base_file, [1, 2, 3])
        assert allocate_slot(base_file, config.versions) == (".0004.clean", 4)

    @pytest.mark.unit
    def test_fills_first_gap(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """With slots {1, 2, 4}, the gap at 3 is allocated."""
        make_revisions(base_file, [1, 2, 4])
        _, slot = allocate_slot(base_file, config.versions)
        assert slot == 3

    @pytest.mark.unit
    def test_saturated_returns_last_slot(
        self,
        base_file: Path,
        small_config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """When every slot is taken, the last slot is reused."""
        make_revisions(base_file, list(range(1, 10)), width=1)
        assert allocate_slot(base_file, small_config.versions) == (".9.clean", 9)

    @pytest.mark.unit
    def test_next_free_slot_past_saturation(
        self,
        base_file: Path,
        small_config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """next_free_slot reports max_version + 1 when saturated."""
        make_revisions(base_file, list(range(1, 10)), width=1)
        assert next_free_slot(base_file, small_config.versions) == 10


class TestListRevisions:
    """Tests for list_revisions function."""

    @pytest.mark.unit
    def test_returns_empty_when_none(self, base_file: Path, config: SaveversConfig) -> None:
        """No revisions gives an empty list."""
        assert list_revisions(base_file, config.versions) == []

    @pytest.mark.unit
    def test_stops_at_first_gap(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """Revisions above a gap are not listed."""
        make_revisions(base_file, [1, 2, 4])
        revisions = list_revisions(base_file, config.versions)
        assert [r.slot for r in revisions] == [1, 2]
        assert revisions[0].size == len("revision 1\n")
        assert revisions[0].modified_at is not None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("token", "expected"),
    [("0", True), ("0042", True), ("", False), ("²", False), ("١٢", False), ("-1", False)],
)
def test_is_count(token: str, expected: bool) -> None:
    """Only runs of ASCII digits count as numbers."""
    assert is_count(token) is expected


class TestParseSelector:
    """Tests for parse_selector function."""

    @pytest.mark.unit
    @pytest.mark.parametrize("token", [None, "", "0", "-0"])
    def test_saved_copy(self, token: str | None) -> None:
        """Empty, 0 and -0 select the saved copy."""
        assert parse_selector(token).kind == SelectorKind.SAVED

    @pytest.mark.unit
    def test_slot(self) -> None:
        """A positive number selects that slot."""
        selector = parse_selector("12")
        assert selector.kind == SelectorKind.SLOT
        assert selector.value == 12

    @pytest.mark.unit
    def test_relative(self) -> None:
        """A negative number counts back from the newest revision."""
        selector = parse_selector("-2")
        assert selector.kind == SelectorKind.RELATIVE
        assert selector.value == -2

    @pytest.mark.unit
    def test_special_tokens(self) -> None:
        """-c closes and -cvs selects the committed copy."""
        assert parse_selector("-c").kind == SelectorKind.CLOSE
        assert parse_selector("-cvs").kind == SelectorKind.COMMITTED

    @pytest.mark.unit
    @pytest.mark.parametrize("token", ["abc", "1a", "--1", "-x", "²", "-²"])
    def test_invalid_token(self, token: str) -> None:
        """Anything else is rejected, naming the token."""
        with pytest.raises(RevisionError, match=token):
            parse_selector(token)


class TestResolveTarget:
    """Tests for resolve_target function."""

    @pytest.mark.unit
    def test_saved_copy_is_the_file(self, base_file: Path, config: SaveversConfig) -> None:
        """Selector 0 resolves to the file on disk."""
        target = resolve_target(base_file, parse_selector("0"), config.versions)
        assert target.path == base_file
        assert target.slot is None

    @pytest.mark.unit
    def test_absolute_slot(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """A slot number resolves to that revision."""
        make_revisions(base_file, [1, 2])
        target = resolve_target(base_file, parse_selector("2"), config.versions)
        assert target.slot == 2
        assert target.path == revision_path(base_file, 2, config.versions)

    @pytest.mark.unit
    def test_missing_slot_raises(self, base_file: Path, config: SaveversConfig) -> None:
        """A slot that does not exist is an error."""
        with pytest.raises(RevisionError, match="does not exist"):
            resolve_target(base_file, parse_selector("5"), config.versions)

    @pytest.mark.unit
    def test_slot_beyond_max_version_raises(
        self, base_file: Path, small_config: SaveversConfig
    ) -> None:
        """Slots above max_version are rejected."""
        with pytest.raises(RevisionError, match="max_version"):
            resolve_target(base_file, parse_selector("10"), small_config.versions)

    @pytest.mark.unit
    def test_relative_counts_back_from_newest(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """-1 is the newest revision, -3 the third newest."""
        make_revisions(base_file, [1, 2, 3, 4])
        assert resolve_target(base_file, parse_selector("-1"), config.versions).slot == 4
        assert resolve_target(base_file, parse_selector("-3"), config.versions).slot == 2

    @pytest.mark.unit
    def test_relative_uses_first_gap(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """Newest means the slot before the first gap."""
        make_revisions(base_file, [1, 2, 5])
        assert resolve_target(base_file, parse_selector("-1"), config.versions).slot == 2

    @pytest.mark.unit
    def test_relative_not_enough_versions(
        self,
        base_file: Path,
        config: SaveversConfig,
        make_revisions: Callable[..., list[Path]],
    ) -> None:
        """Counting back past slot 1 fails."""
        make_revisions(base_file, [1, 2])
        with pytest.raises(RevisionError, match="Not enough versions"):
            resolve_target(base_file, parse_selector("-3"), config.versions)

    @pytest.mark.unit
    def test_committed_copy_from_git(self, base_file: Path, config: SaveversConfig) -> None:
        """-cvs fetches the committed content."""
        with patch(
            "savevers.core.revisions.get_committed_content", return_value="from git\n"
        ) as mock_git:
            target = resolve_target(base_file, parse_selector("-cvs"), config.versions)
        mock_git.assert_called_once_with(base_file)
        assert target.content == "from git\n"
        assert target.path is None

    @pytest.mark.unit
    def test_close_has_no_target(self, base_file: Path, config: SaveversConfig) -> None:
        """The close selector cannot be resolved."""
        with pytest.raises(RevisionError):
            resolve_target(base_file, parse_selector("-c"), config.versions)
