"""Replay key-press scripts through a calculator session."""
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath

from button_calculator.common.config import CalculatorSettings
from button_calculator.common.logger import logger
from button_calculator.common.tokens import tokenize
from button_calculator.session.session import CalculatorSession


class ScriptReplayer(BaseModel):
    """
    Headless driver feeding key presses to a CalculatorSession.

    The replayer:
    - reads a key-press script from a plain text file or an archive
    - presses every key of a line, in order, on a single session
    - writes "<line> => <display>" for each non-empty line into an output file

    Error messages number lines as in the script, blank lines included.
    """

    # Settings must not change while a script is running
    model_config = ConfigDict(frozen=True)

    settings: CalculatorSettings = Field(default_factory=CalculatorSettings)

    def replay_lines(self, lines: List[str]) -> List[str]:
        """
        Press the keys of each line and collect the display after each line.

        :param List[str] lines: Script lines, keys separated by whitespace

        :return: One "<line> => <display>" entry per non-empty line
        :rtype: List[str]
        :raises ValueError: If a line contains an unknown key
        """
        session = CalculatorSession(settings=self.settings)
        transcript: List[str] = []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line:
                continue
            display = session.display
            for key in tokenize(line):
                try:
                    display = session.press(key)
                except ValueError as exc:
                    raise ValueError(f"Line {line_number}: {exc}") from exc
            logger.info(f"⌨️ Line {line_number}: {line} => {display}")
            transcript.append(f"{line} => {display}")
        return transcript

    def replay_file(self, input_file: FilePath, output_file: Path) -> None:
        """
        Replay a script file or archive and write the display transcript.

        :param FilePath input_file: Path to the script or archive
        :param Path output_file: Path where the transcript is written

        :return: None
        :raises ValueError: If the archive format is unsupported, contains no .txt file, or a key is unknown
        """
        if input_file.suffix == ".txt":
            content = input_file.read_text()
        else:
            content = self._extract_archive(input_file)

        transcript = self.replay_lines(content.splitlines())
        with output_file.open("w", encoding="utf-8") as f_out:
            for entry in transcript:
                f_out.write(f"{entry}\n")
        logger.info(f"📄✅ Wrote {len(transcript)} lines to {output_file}")

    @staticmethod
    def _script_member(names: List[str], archive_path: Path) -> str:
        """
        Pick the key script among the member names of an archive: the first .txt file.

        :raises ValueError: If the archive holds no .txt file
        """
        scripts = [name for name in names if name.endswith(".txt")]
        if not scripts:
            raise ValueError(f"⌨️❌ No .txt key script inside {archive_path.name}")
        return scripts[0]

    def _extract_archive(self, archive_path: FilePath) -> str:
        """
        Read the key script packed in a .zip, .tar.xz or .7z archive.

        :param FilePath archive_path: Path to the archive file

        :return: Text of the key script
        :rtype: str
        :raises ValueError: If the archive holds no key script or its format is unsupported
        """
        if archive_path.suffix == ".zip":
            with zipfile.ZipFile(archive_path, "r") as zf:
                member = self._script_member(zf.namelist(), archive_path)
                return zf.read(member).decode("utf-8")

        if archive_path.suffixes[-2:] == [".tar", ".xz"]:
            with tarfile.open(archive_path, "r:xz") as tf:
                member = self._script_member([m.name for m in tf.getmembers() if m.isfile()], archive_path)
                return tf.extractfile(member).read().decode("utf-8")

        if archive_path.suffix == ".7z":
            # py7zr only extracts to disk
            with tempfile.TemporaryDirectory() as tmpdir, py7zr.SevenZipFile(archive_path, mode="r") as archive:
                member = self._script_member(archive.getnames(), archive_path)
                archive.extract(path=tmpdir, targets=[member])
                return (Path(tmpdir) / member).read_text(encoding="utf-8")

        raise ValueError(f"⌨️❌ Unsupported key script archive: {archive_path.name}")
