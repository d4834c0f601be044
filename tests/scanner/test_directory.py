"""Unit tests for scanner.directory module."""

import os
from pathlib import Path

import pytest

from ptime.errors import PathResolutionError, RelativePathError, TraversalError
from ptime.scanner.directory import (
    compute_relative_path,
    is_image_file,
    iter_candidates,
    resolve_root,
    scan_candidates,
)


def _relative_paths(candidates):
    return {c.relative_path for c in candidates}


class TestIsImageFile:
    """Tests for is_image_file() function."""

    @pytest.mark.parametrize("name", ["photo.jpg", "photo.jpeg", "photo.JPG", "photo.JPEG", "photo.JpG"])
    def test_jpeg_extensions(self, name):
        assert is_image_file(name)

    @pytest.mark.parametrize("name", ["photo.png", "photo.gif", "photo", "photo.txt", "jpg", ".jpg.txt"])
    def test_non_jpeg_extensions(self, name):
        assert not is_image_file(name)

    def test_custom_extensions(self):
        assert is_image_file("scan.TIFF", extensions=("tif", "tiff"))
        assert not is_image_file("scan.jpg", extensions=("tif", "tiff"))


class TestScanCandidates:
    """Tests for scan_candidates() function."""

    def test_scan_empty_directory(self, tmp_path):
        assert scan_candidates(tmp_path) == []

    def test_scan_finds_jpeg_files_case_insensitively(self, tmp_path):
        (tmp_path / "photo1.jpg").write_bytes(b"fake jpeg")
        (tmp_path / "photo2.JPEG").write_bytes(b"fake jpeg")
        (tmp_path / "photo3.JPG").write_bytes(b"fake jpeg")
        (tmp_path / "document.txt").write_bytes(b"not a jpeg")
        (tmp_path / "image.png").write_bytes(b"not a jpeg")

        result = scan_candidates(tmp_path)

        assert len(result) == 3
        assert _relative_paths(result) == {Path("photo1.jpg"), Path("photo2.JPEG"), Path("photo3.JPG")}

    def test_scan_nested_directories(self, tmp_path):
        (tmp_path / "subdir" / "nested").mkdir(parents=True)
        (tmp_path / "root.jpg").write_bytes(b"fake")
        (tmp_path / "subdir" / "photo.jpg").write_bytes(b"fake")
        (tmp_path / "subdir" / "nested" / "deep.jpeg").write_bytes(b"fake")

        result = scan_candidates(tmp_path)

        assert _relative_paths(result) == {
            Path("root.jpg"),
            Path("subdir/photo.jpg"),
            Path("subdir/nested/deep.jpeg"),
        }

    def test_absolute_paths_are_under_canonical_root(self, tmp_path):
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "x.jpg").write_bytes(b"fake")

        [candidate] = scan_candidates(tmp_path)

        assert candidate.absolute_path == tmp_path.resolve() / "a" / "x.jpg"
        assert candidate.absolute_path.is_absolute()

    def test_current_directory_canonicalization(self, tmp_path, monkeypatch):
        (tmp_path / "test.jpg").write_bytes(b"fake")
        monkeypatch.chdir(tmp_path)

        result = scan_candidates(Path("."))

        assert len(result) == 1
        assert result[0].relative_path == Path("test.jpg")

    def test_directory_named_like_image_is_not_a_candidate(self, tmp_path):
        (tmp_path / "album.jpg").mkdir()
        (tmp_path / "album.jpg" / "inner.jpg").write_bytes(b"fake")

        result = scan_candidates(tmp_path)

        assert _relative_paths(result) == {Path("album.jpg/inner.jpg")}

    def test_symlinked_directory_not_followed(self, tmp_path):
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "elsewhere.jpg").write_bytes(b"fake")
        root = tmp_path / "root"
        root.mkdir()
        (root / "own.jpg").write_bytes(b"fake")
        os.symlink(outside, root / "link", target_is_directory=True)

        result = scan_candidates(root)

        assert _relative_paths(result) == {Path("own.jpg")}

    def test_symlinked_file_not_reported(self, tmp_path):
        (tmp_path / "real.jpg").write_bytes(b"fake")
        os.symlink(tmp_path / "real.jpg", tmp_path / "alias.jpg")

        result = scan_candidates(tmp_path)

        assert _relative_paths(result) == {Path("real.jpg")}

    def test_symlinked_root_is_resolved(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        (real / "photo.jpg").write_bytes(b"fake")
        os.symlink(real, tmp_path / "link", target_is_directory=True)

        [candidate] = scan_candidates(tmp_path / "link")

        assert candidate.relative_path == Path("photo.jpg")
        assert candidate.absolute_path == real.resolve() / "photo.jpg"

    def test_custom_extensions(self, tmp_path):
        (tmp_path / "a.tif").write_bytes(b"fake")
        (tmp_path / "b.jpg").write_bytes(b"fake")

        result = scan_candidates(tmp_path, extensions=("tif",))

        assert _relative_paths(result) == {Path("a.tif")}


class TestScanErrors:
    """Tests for fatal scanning errors."""

    def test_nonexistent_root(self, tmp_path):
        missing = tmp_path / "nonexistent"

        with pytest.raises(PathResolutionError) as exc_info:
            scan_candidates(missing)

        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)
        assert exc_info.value.exit_code == 3

    def test_resolve_root_returns_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_root(Path(".")) == tmp_path.resolve()

    def test_root_is_a_file(self, tmp_path):
        photo = tmp_path / "photo.jpg"
        photo.write_bytes(b"fake")

        with pytest.raises(TraversalError) as exc_info:
            scan_candidates(photo)

        assert exc_info.value.path == photo.resolve()
        assert exc_info.value.exit_code == 3

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="permission checks are bypassed for root",
    )
    def test_unreadable_subdirectory_is_fatal(self, tmp_path):
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "hidden.jpg").write_bytes(b"fake")
        locked.chmod(0o000)

        try:
            with pytest.raises(TraversalError) as exc_info:
                scan_candidates(tmp_path)
            assert exc_info.value.path == locked.resolve()
        finally:
            locked.chmod(0o755)

    def test_traversal_error_stops_iteration(self, tmp_path, mocker):
        (tmp_path / "a.jpg").write_bytes(b"fake")
        mocker.patch("ptime.scanner.directory.os.scandir", side_effect=PermissionError(13, "Permission denied"))

        candidates = iter_candidates(tmp_path)

        with pytest.raises(TraversalError, match="Permission denied"):
            next(candidates)


class TestComputeRelativePath:
    """Tests for compute_relative_path() function."""

    def test_strips_root(self):
        root = Path("/base/path")
        assert compute_relative_path(root, Path("/base/path/subdir/file.jpg")) == Path("subdir/file.jpg")

    def test_outside_root_raises(self):
        with pytest.raises(RelativePathError) as exc_info:
            compute_relative_path(Path("/base/path"), Path("/other/file.jpg"))

        assert exc_info.value.exit_code == 1
        assert "/other/file.jpg" in str(exc_info.value)
