"""Reading of problem instance files.

A problem file holds ``name = value`` settings, one per line. ``#`` starts a
comment. The first setting must be ``Version`` with the value ``1``.
"""

from __future__ import annotations

from typing import Dict, Iterable, Union
import os

_WHITE = " \t"


class ProblemFileError(Exception):
    """Base class for problem file errors."""


class InvalidFormatError(ProblemFileError):
    """A line is not of the form name = value."""


class MissingVersionError(ProblemFileError):
    """The first setting is not Version."""


class UnexpectedVersionError(ProblemFileError):
    """The Version setting has an unsupported value."""


def parse_problem_file(lines: Iterable[str]) -> Dict[str, str]:
    """Parse problem file lines and return the settings in file order."""
    settings: Dict[str, str] = {}
    expecting_version = True
    for line_number, raw in enumerate(lines, start=1):
        line = raw[:-1] if raw.endswith("\n") else raw
        line = line.split("#", 1)[0].strip(_WHITE)
        if not line:
            continue
        name, separator, value = line.partition("=")
        if not separator:
            raise InvalidFormatError(f"line {line_number}: expected 'name = value'")
        name = name.rstrip(_WHITE)
        value = value.lstrip(_WHITE)
        if expecting_version:
            if name != "Version":
                raise MissingVersionError(
                    f"line {line_number}: first setting must be Version, not {name!r}"
                )
            if value != "1":
                raise UnexpectedVersionError(f"line {line_number}: unsupported version {value!r}")
            expecting_version = False
        settings[name] = value
    return settings


def load_problem_file(file_name: Union[str, os.PathLike]) -> Dict[str, str]:
    """Open and parse a problem file; OSError is raised if it cannot be opened."""
    with open(file_name, encoding="utf-8") as problem_file:
        return parse_problem_file(problem_file)