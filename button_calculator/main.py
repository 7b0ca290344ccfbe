"""
Command-line entrypoint replaying a key-press script through the calculator.

This script:
- Validates the script path given as argument
- Presses every key of the script on a single calculator session
- Writes the display after each script line next to the input file

Example script (keys separated by spaces, one intent group per line):

    1 2 + 3 =
    * 2 =
    C
    5 / 0 =
"""

import argparse
from pathlib import Path

from pydantic import BaseModel, FilePath, ValidationError

from button_calculator.common.logger import logger
from button_calculator.session.replay import ScriptReplayer


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath
        Path to the key-press script or an archive containing it.
    """

    file_path: FilePath


def parse_args(argv=None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Replay calculator key presses and record the display"
    )

    parser.add_argument(
        "file_path",
        help="Path to the key-press script (.txt, .zip, .tar.xz or .7z)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the transcript path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_display.txt' at the end

    Examples
    --------
    input: scripts/session.7z
    output: scripts/session_7z_display.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffixes = "".join(input_path.suffixes)
    suffix_safe = suffixes.replace(".", "_")
    # Strip every suffix from the name, not only the last one
    stem = input_path.name[: len(input_path.name) - len(suffixes)]
    return input_path.with_name(f"{stem}{suffix_safe}_display.txt")


def main(argv=None) -> None:
    """
    Main function executed from the command line.
    """
    cli_args = parse_args(argv)
    input_path: Path = Path(cli_args.file_path)
    output_path: Path = build_output_path(input_path)

    logger.info(f"▶️ Replaying {input_path}")
    ScriptReplayer().replay_file(input_path, output_path)


if __name__ == "__main__":
    main()
