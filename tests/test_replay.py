"""Test class ScriptReplayer."""
import tarfile
import zipfile

import py7zr
import pytest

from button_calculator.common.config import CalculatorSettings
from button_calculator.session.replay import ScriptReplayer


SCRIPT = "1 2 + 3 =\n\n* 2 =\nC\n5 / 0 =\n"


def test_replay_lines_keeps_one_session() -> None:
    """Lines share the session, so a later line continues from an earlier result."""
    transcript = ScriptReplayer().replay_lines(SCRIPT.splitlines())
    assert transcript == [
        "1 2 + 3 = => 15",
        "* 2 = => 30",
        "C => 0",
        "5 / 0 = => Error",
    ]


def test_replay_lines_uses_settings() -> None:
    replayer = ScriptReplayer(settings=CalculatorSettings(error_text="E"))
    assert replayer.replay_lines(["1 / 0 ="]) == ["1 / 0 = => E"]


def test_replay_lines_unknown_key() -> None:
    with pytest.raises(ValueError, match="Line 2"):
        ScriptReplayer().replay_lines(["1 + 1 =", "2 ^ 2 ="])


def test_replay_lines_error_counts_blank_lines() -> None:
    """Line numbers in errors match the script file, blank lines included."""
    with pytest.raises(ValueError, match="Line 4"):
        ScriptReplayer().replay_lines(["1 + 1 =", "", "   ", "2 ^ 2 ="])


def test_replay_file_txt(tmp_path) -> None:
    input_file = tmp_path / "keys.txt"
    output_file = tmp_path / "display.txt"
    input_file.write_text("4 * 4 =\n")

    ScriptReplayer().replay_file(input_file, output_file)

    assert output_file.read_text() == "4 * 4 = => 16\n"


def test_replay_file_archive(tmp_path) -> None:
    txt = tmp_path / "keys.txt"
    txt.write_text("9 - 3 =\n")
    zip_path = tmp_path / "keys.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.write(txt, arcname="keys.txt")
    output_file = tmp_path / "display.txt"

    ScriptReplayer().replay_file(zip_path, output_file)

    assert output_file.read_text() == "9 - 3 = => 6\n"


def test_extract_zip(tmp_path) -> None:
    """Check that a .zip archive can be extracted and read correctly."""
    txt = tmp_path / "keys.txt"
    txt.write_text("3 + 3 =\n")

    zip_path = tmp_path / "keys.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.write(txt, arcname="keys.txt")

    assert ScriptReplayer()._extract_archive(zip_path) == "3 + 3 =\n"


def test_extract_tar_xz(tmp_path) -> None:
    """Check that a .tar.xz archive can be extracted and read correctly."""
    txt = tmp_path / "keys.txt"
    txt.write_text("4 * 4 =\n")

    tar_path = tmp_path / "keys.tar.xz"
    with tarfile.open(tar_path, "w:xz") as tf:
        tf.add(txt, arcname="keys.txt")

    assert ScriptReplayer()._extract_archive(tar_path) == "4 * 4 =\n"


def test_extract_7z(tmp_path) -> None:
    """Check that a .7z archive can be extracted and read correctly."""
    txt = tmp_path / "keys.txt"
    txt.write_text("5 - 2 =\n")

    archive_path = tmp_path / "keys.7z"
    with py7zr.SevenZipFile(archive_path, "w") as archive:
        archive.write(txt, arcname="keys.txt")

    assert ScriptReplayer()._extract_archive(archive_path) == "5 - 2 =\n"


def test_extract_archive_no_txt(tmp_path) -> None:
    """Verify that extraction fails if no .txt file exists in the archive."""
    zip_path = tmp_path / "empty.zip"
    with zipfile.ZipFile(zip_path, "w") as zf:
        zf.writestr("data.bin", b"\x00\x01")

    with pytest.raises(ValueError, match="No .txt key script inside empty.zip"):
        ScriptReplayer()._extract_archive(zip_path)


def test_extract_unsupported_format(tmp_path) -> None:
    """Ensure unsupported archive formats raise a ValueError."""
    file_path = tmp_path / "keys.rar"
    file_path.write_text("1 + 1 =")

    with pytest.raises(ValueError):
        ScriptReplayer()._extract_archive(file_path)


def test_extract_tar_xz_skips_directories(tmp_path) -> None:
    """The first regular .txt member of a tar archive is the key script."""
    scripts = tmp_path / "scripts.txt"
    scripts.mkdir()
    (scripts / "keys.txt").write_text("6 / 3 =\n")

    tar_path = tmp_path / "keys.tar.xz"
    with tarfile.open(tar_path, "w:xz") as tf:
        tf.add(scripts, arcname="scripts.txt")

    assert ScriptReplayer()._extract_archive(tar_path) == "6 / 3 =\n"


def test_replay_lines_splits_on_any_whitespace() -> None:
    assert ScriptReplayer().replay_lines(["7\t*  6 ="]) == ["7\t*  6 = => 42"]
