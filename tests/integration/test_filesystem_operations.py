"""Integration tests for LocalFileSystem against the real disk.

HOME and the working directory point at temporary directories (see
conftest.py), so every root resolves inside tmp_path.
"""

from pathlib import Path

import pytest

from maskerad_filesystem.adapters.fs.local import LocalFileSystem
from maskerad_filesystem.domain.exceptions import (
    ExtensionError,
    FileIOError,
    FSErrorKind,
    MiscellaneousError,
)
from maskerad_filesystem.domain.open_options import OpenOptions
from maskerad_filesystem.domain.value_objects import FileExtension, RootDir

USER_ROOTS = [
    RootDir.USER_LOG_ROOT,
    RootDir.USER_DATA_ROOT,
    RootDir.USER_ENGINE_CONFIGURATION_ROOT,
    RootDir.USER_CONFIG_ROOT,
    RootDir.USER_SAVE_ROOT,
    RootDir.WORKING_DIRECTORY,
]


class TestRootResolution:
    """Roots resolve under the isolated HOME and working directory."""

    def test_working_directory_is_cwd(self, filesystem: LocalFileSystem) -> None:
        assert filesystem.path(RootDir.WORKING_DIRECTORY) == Path.cwd()

    def test_user_roots_under_home(self, filesystem: LocalFileSystem, home_dir: Path) -> None:
        name = filesystem.application_info().name
        assert filesystem.path(RootDir.USER_LOG_ROOT) == (
            home_dir / ".config" / name / "maskerad_logs"
        )
        assert filesystem.path(RootDir.USER_SAVE_ROOT) == (
            home_dir / ".local" / "share" / name / "game_saves"
        )

    def test_ensure_root_directories(self, filesystem: LocalFileSystem) -> None:
        assert not filesystem.exists(RootDir.USER_LOG_ROOT)

        filesystem.ensure_root_directories()
        filesystem.ensure_root_directories()

        assert filesystem.exists(RootDir.USER_SAVE_ROOT)
        assert filesystem.exists(RootDir.USER_LOG_ROOT)
        assert filesystem.exists(RootDir.USER_ENGINE_CONFIGURATION_ROOT)


class TestCreateAppendRead:
    """Write, append and read back through every root."""

    @pytest.mark.parametrize("root", USER_ROOTS)
    def test_create_append_read(self, filesystem: LocalFileSystem, root: RootDir) -> None:
        filesystem.mkdir(root, "dir_test")
        assert filesystem.exists(root, "dir_test")

        with filesystem.create(root, "dir_test/file_test.txt") as writer:
            filesystem.write_all(writer, b"text_test\n")
        with filesystem.append(root, "dir_test/file_test.txt") as writer:
            filesystem.write_all(writer, b"text_append_test\n")

        with filesystem.open(root, "dir_test/file_test.txt") as reader:
            content = filesystem.read_to_string(reader)

        lines = iter(content.splitlines())
        assert next(lines, None) == "text_test"
        assert next(lines, None) == "text_append_test"
        assert next(lines, None) is None

    def test_create_truncates_existing(self, filesystem: LocalFileSystem) -> None:
        with filesystem.create(RootDir.WORKING_DIRECTORY, "file.txt") as writer:
            filesystem.write_all(writer, b"long original content")
        with filesystem.create(RootDir.WORKING_DIRECTORY, "file.txt") as writer:
            filesystem.write_all(writer, b"short")

        with filesystem.open(RootDir.WORKING_DIRECTORY, "file.txt") as reader:
            buf = bytearray()
            filesystem.read_to_end(reader, buf)

        assert buf == bytearray(b"short")

    def test_read_exact(self, filesystem: LocalFileSystem) -> None:
        with filesystem.create(RootDir.WORKING_DIRECTORY, "data.bin") as writer:
            assert filesystem.write(writer, b"0123456789") == 10

        with filesystem.open(RootDir.WORKING_DIRECTORY, "data.bin") as reader:
            head = bytearray(4)
            filesystem.read_exact(reader, head)
            rest = bytearray(6)
            assert filesystem.read(reader, rest) == 6
            with pytest.raises(FileIOError):
                filesystem.read_exact(reader, bytearray(1))

        assert head == bytearray(b"0123")
        assert rest == bytearray(b"456789")

    def test_open_missing_file(self, filesystem: LocalFileSystem) -> None:
        with pytest.raises(FileIOError) as exc_info:
            filesystem.open(RootDir.WORKING_DIRECTORY, "missing.txt")
        assert exc_info.value.kind is FSErrorKind.IO

    def test_open_with_options(self, filesystem: LocalFileSystem) -> None:
        options = OpenOptions().set_create(True).set_read(True).set_write(True)
        with filesystem.open_with_options(options, RootDir.WORKING_DIRECTORY, "rw.txt") as handle:
            filesystem.write_all(handle, b"abc")
            handle.seek(0)
            assert filesystem.read_to_string(handle) == "abc"


class TestRemoval:
    """rm and rmrf semantics."""

    def test_rm_file(self, filesystem: LocalFileSystem) -> None:
        filesystem.mkdir(RootDir.WORKING_DIRECTORY, "dir_test")
        with filesystem.create(RootDir.WORKING_DIRECTORY, "dir_test/file_test_rm.txt") as writer:
            filesystem.write_all(writer, b"test rm\n")

        filesystem.rm(RootDir.WORKING_DIRECTORY, "dir_test/file_test_rm.txt")

        assert not filesystem.exists(RootDir.WORKING_DIRECTORY, "dir_test/file_test_rm.txt")

    def test_rm_empty_directory(self, filesystem: LocalFileSystem) -> None:
        filesystem.mkdir(RootDir.USER_DATA_ROOT, "empty")
        filesystem.rm(RootDir.USER_DATA_ROOT, "empty")
        assert not filesystem.exists(RootDir.USER_DATA_ROOT, "empty")

    def test_rm_non_empty_directory_fails(self, filesystem: LocalFileSystem) -> None:
        filesystem.mkdir(RootDir.USER_DATA_ROOT, "full")
        with filesystem.create(RootDir.USER_DATA_ROOT, "full/child.txt"):
            pass

        with pytest.raises(FileIOError):
            filesystem.rm(RootDir.USER_DATA_ROOT, "full")

        assert filesystem.exists(RootDir.USER_DATA_ROOT, "full/child.txt")

    def test_rm_uses_resolved_path(self, filesystem: LocalFileSystem, working_dir: Path) -> None:
        # The relative argument must not be interpreted against the cwd
        (working_dir / "same_name").mkdir()
        filesystem.mkdir(RootDir.USER_DATA_ROOT, "same_name")

        filesystem.rm(RootDir.USER_DATA_ROOT, "same_name")

        assert not filesystem.exists(RootDir.USER_DATA_ROOT, "same_name")
        assert (working_dir / "same_name").is_dir()

    def test_rmrf_tree(self, filesystem: LocalFileSystem) -> None:
        filesystem.mkdir(RootDir.WORKING_DIRECTORY, "dir_test/a/b")
        with filesystem.create(RootDir.WORKING_DIRECTORY, "dir_test/a/b/f.txt"):
            pass

        filesystem.rmrf(RootDir.WORKING_DIRECTORY, "dir_test")

        assert not filesystem.exists(RootDir.WORKING_DIRECTORY, "dir_test")

    def test_rmrf_missing_is_noop(self, filesystem: LocalFileSystem, tmp_path: Path) -> None:
        filesystem.rmrf(RootDir.USER_LOG_ROOT, "never_created")
        filesystem.rmrf(tmp_path / "never_created")

    def test_rmrf_root_itself(self, filesystem: LocalFileSystem) -> None:
        filesystem.mkdir(RootDir.USER_SAVE_ROOT, "slot_1")
        filesystem.rmrf(RootDir.USER_SAVE_ROOT)
        assert not filesystem.exists(RootDir.USER_SAVE_ROOT)


class TestMetadataAndListing:
    """metadata and read_dir."""

    def test_file_metadata(self, filesystem: LocalFileSystem) -> None:
        with filesystem.create(RootDir.WORKING_DIRECTORY, "file_test.txt") as writer:
            filesystem.write_all(writer, b"text_test\n")

        meta = filesystem.metadata(RootDir.WORKING_DIRECTORY, "file_test.txt")

        assert meta.is_file
        assert not meta.is_dir
        assert not meta.is_read_only
        assert meta.len > 0

    def test_metadata_missing(self, filesystem: LocalFileSystem) -> None:
        with pytest.raises(FileIOError):
            filesystem.metadata(RootDir.WORKING_DIRECTORY, "missing")

    def test_read_dir(self, filesystem: LocalFileSystem) -> None:
        filesystem.mkdir(RootDir.WORKING_DIRECTORY, "src/platforms")
        for name in ("lib.txt", "errors.txt"):
            with filesystem.create(RootDir.WORKING_DIRECTORY, f"src/{name}"):
                pass

        names = sorted(e.name for e in filesystem.read_dir(RootDir.WORKING_DIRECTORY, "src"))

        assert names == ["errors.txt", "lib.txt", "platforms"]


class TestAbsolutePaths:
    """The absolute-path calling convention."""

    def test_operations_on_absolute_path(self, filesystem: LocalFileSystem, tmp_path: Path) -> None:
        target = tmp_path / "outside.txt"
        target.write_bytes(b"outside")

        assert filesystem.exists(target)
        assert filesystem.metadata(target).len == 7
        with filesystem.open(str(target)) as reader:
            assert filesystem.read_to_string(reader) == "outside"

        filesystem.rm(target)
        assert not filesystem.exists(target)

    def test_missing_absolute_path(self, filesystem: LocalFileSystem, tmp_path: Path) -> None:
        assert not filesystem.exists(tmp_path / "missing")
        with pytest.raises(FileIOError):
            filesystem.open(tmp_path / "missing")

    def test_null_byte_absolute_path(self, filesystem: LocalFileSystem, tmp_path: Path) -> None:
        bad = f"{tmp_path}/bad\x00name"

        assert not filesystem.exists(bad)
        filesystem.rmrf(bad)
        with pytest.raises(FileIOError):
            filesystem.open(bad)

    @pytest.mark.parametrize("operation", ["open", "create", "mkdir", "rm", "metadata", "read_dir"])
    def test_null_byte_relative_path(self, filesystem: LocalFileSystem, operation: str) -> None:
        with pytest.raises(FileIOError):
            getattr(filesystem, operation)(RootDir.WORKING_DIRECTORY, "bad\x00name")
        assert not filesystem.exists(RootDir.WORKING_DIRECTORY, "bad\x00name")

    def test_mixed_conventions(self, filesystem: LocalFileSystem, tmp_path: Path) -> None:
        with pytest.raises(MiscellaneousError):
            filesystem.open(tmp_path, "child.txt")

    def test_get_absolute_path(self, filesystem: LocalFileSystem) -> None:
        assert filesystem.get_absolute_path(RootDir.USER_LOG_ROOT, "") == filesystem.path(
            RootDir.USER_LOG_ROOT
        )
        assert filesystem.construct_path_from_root(RootDir.USER_LOG_ROOT, "x") == (
            filesystem.path(RootDir.USER_LOG_ROOT) / "x"
        )


class TestFileExtension:
    """get_file_extension through the facade."""

    def test_supported(self, filesystem: LocalFileSystem) -> None:
        assert filesystem.get_file_extension("asset.tga") is FileExtension.TGA

    def test_unsupported(self, filesystem: LocalFileSystem) -> None:
        with pytest.raises(ExtensionError):
            filesystem.get_file_extension("asset.unknown")
        with pytest.raises(ExtensionError):
            filesystem.get_file_extension("noext")
