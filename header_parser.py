"""Header parser for DefinitelyTyped-style type definition files.

Validates the fixed comment block at the top of an `index.d.ts` file and
extracts it into a HeaderRecord. Also owns the registry of known TypeScript
versions and builds the `typesVersions` table of a package manifest.

Usage:
    record = parse_header_or_fail(index_d_ts_text)
    table = make_types_versions_for_package_json(["4.2", "4.6"])
"""

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

DEFINITELY_TYPED_URL = "https://github.com/DefinitelyTyped/DefinitelyTyped"
TAG_PREFIX = "ts"
LATEST_TAG = "latest"


# ===--- Errors ---=== #


PARSE_ERROR_CODES = {
    "MISSING_LINE",
    "MALFORMED_TITLE",
    "MALFORMED_PROJECT",
    "MALFORMED_CONTRIBUTOR",
    "MALFORMED_DEFINITIONS",
    "MALFORMED_VERSION_LINE",
    "BAD_CONTINUATION",
}
VALID_ERROR_CODES = PARSE_ERROR_CODES | {"INVALID_VERSION", "REDIRECT_TOO_NEW"}


class HeaderError(Exception):
    """Base for every failure raised by the parser and the version registry.

    Attributes:
        code: Machine-readable error code, one of VALID_ERROR_CODES.
        message: Human-readable description.
        suggestion: Optional hint on how to fix the input.
        line: Raw text of the offending line, when one exists.
        line_number: 1-based position of the offending line in the header.
    """

    def __init__(
        self,
        code: str,
        message: str,
        suggestion: str | None = None,
        line: str | None = None,
        line_number: int | None = None,
    ):
        if code not in VALID_ERROR_CODES:
            raise ValueError(f"Unknown header error code: {code}")
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.line = line
        self.line_number = line_number


class HeaderParseError(HeaderError):
    """A required header line is missing, out of order or malformed."""

    def __init__(
        self,
        code: str,
        message: str,
        expected: Sequence[str] = (),
        suggestion: str | None = None,
        line: str | None = None,
        line_number: int | None = None,
    ):
        if code not in PARSE_ERROR_CODES:
            raise ValueError(f"Not a header parse error code: {code}")
        super().__init__(code, message, suggestion, line, line_number)
        self.expected = tuple(expected)


class InvalidVersion(HeaderError):
    """A version token is well formed but not a known TypeScript version."""

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        line: str | None = None,
        line_number: int | None = None,
    ):
        super().__init__("INVALID_VERSION", message, suggestion, line, line_number)


class RedirectTooNew(HeaderError):
    """A typesVersions table would redirect every compiler version."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__("REDIRECT_TOO_NEW", message, suggestion)


# ===--- Version registry ---=== #


class TypeScriptVersion(NamedTuple):
    major: int
    minor: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


_VERSION_ID_RE = re.compile(r"^(\d+)\.(\d+)$")

# (major, first minor, last minor), oldest to newest.
_VERSION_TABLE: tuple[tuple[int, int, int], ...] = (
    (2, 0, 9),
    (3, 0, 9),
    (4, 0, 9),
    (5, 0, 0),
)
FIRST_SUPPORTED_VERSION = "4.1"


def parse_version_id(raw: str) -> TypeScriptVersion | None:
    """Return the (major, minor) pair of a "MAJOR.MINOR" string, or None."""
    match = _VERSION_ID_RE.match(raw)
    if match is None:
        return None
    return TypeScriptVersion(int(match.group(1)), int(match.group(2)))


def expand_version_table(table: Iterable[tuple[int, int, int]]) -> tuple[str, ...]:
    """Expand (major, first_minor, last_minor) rows into ordered version ids."""
    return tuple(
        str(TypeScriptVersion(major, minor))
        for major, first_minor, last_minor in table
        for minor in range(first_minor, last_minor + 1)
    )


class VersionRegistry:
    """Ordered, gap-free catalogue of TypeScript versions.

    The catalogue is split into an unsupported prefix and a supported suffix
    starting at `first_supported`. Instances are never mutated after
    construction and can be shared freely.

    Args:
        versions: Version ids, oldest to newest. Each entry must be exactly one
            minor release after its predecessor, or the `.0` of the next major.
        first_supported: Oldest version still actively supported.

    Raises:
        ValueError: If the table is empty, malformed, unordered or has a gap,
            or if `first_supported` is not part of it.
    """

    def __init__(self, versions: Sequence[str], first_supported: str):
        if not versions:
            raise ValueError("Version table must not be empty")

        parsed: list[TypeScriptVersion] = []
        for raw in versions:
            version = parse_version_id(raw)
            if version is None or str(version) != raw:
                raise ValueError(f"Malformed version id in table: {raw!r}")
            parsed.append(version)

        for prev, cur in zip(parsed, parsed[1:]):
            successors = (
                TypeScriptVersion(prev.major, prev.minor + 1),
                TypeScriptVersion(prev.major + 1, 0),
            )
            if cur not in successors:
                raise ValueError(f"Version table is not contiguous: {prev} -> {cur}")

        self._all = tuple(versions)
        self._parsed = tuple(parsed)
        self._positions = {version: index for index, version in enumerate(self._all)}

        if first_supported not in self._positions:
            raise ValueError(f"Marker version {first_supported} is not in the table")
        self._first_supported_index = self._positions[first_supported]

    def all(self) -> tuple[str, ...]:
        return self._all

    def supported(self) -> tuple[str, ...]:
        return self._all[self._first_supported_index :]

    def unsupported(self) -> tuple[str, ...]:
        return self._all[: self._first_supported_index]

    @property
    def oldest(self) -> str:
        return self._all[0]

    @property
    def newest(self) -> str:
        return self._all[-1]

    @property
    def lowest_supported(self) -> str:
        return self._all[self._first_supported_index]

    def is_version_id(self, value: object) -> bool:
        """Return True when value is a "MAJOR.MINOR" id inside the catalogue.

        The catalogue is gap free, so a well-formed id between the oldest and
        newest entries is valid exactly when it sits on the catalogue's grid.
        "3.14" is inside the numeric bounds but not on the grid.
        """
        if not isinstance(value, str):
            return False
        version = parse_version_id(value)
        if version is None:
            return False
        if not self._parsed[0] <= version <= self._parsed[-1]:
            return False
        return value in self._positions

    def is_supported(self, version: str) -> bool:
        index = self._positions.get(version)
        return index is not None and index >= self._first_supported_index

    def validate_version_id(self, version: str) -> str:
        """Return `version` unchanged, or raise InvalidVersion if it is unknown."""
        if self.is_version_id(version):
            return version
        raise InvalidVersion(
            f"Unknown TypeScript version: {version!r}",
            f"Use a version from {self.oldest} to {self.newest}.",
        )

    def sort_key(self, version: str) -> TypeScriptVersion:
        return self._parsed[self._positions[self.validate_version_id(version)]]

    def next_version(self, version: str) -> str | None:
        """Return the catalogue entry right after `version`, None for the newest."""
        index = self._positions[self.validate_version_id(version)]
        if index + 1 == len(self._all):
            return None
        return self._all[index + 1]

    def range(self, start: str) -> tuple[str, ...]:
        """Return every version from `start` to the newest, inclusive.

        Raises:
            InvalidVersion: If `start` is not in the catalogue.
        """
        return self._all[self._positions[self.validate_version_id(start)] :]

    def tags_to_update(self, start: str) -> tuple[str, ...]:
        """Return the distribution tags to move when publishing for `start` onwards.

        One `ts<version>` tag per entry of range(start), then the `latest` tag.
        """
        return tuple(f"{TAG_PREFIX}{version}" for version in self.range(start)) + (
            LATEST_TAG,
        )


TYPESCRIPT_VERSIONS = VersionRegistry(
    expand_version_table(_VERSION_TABLE), FIRST_SUPPORTED_VERSION
)
"""Process-wide registry of every TypeScript version the headers may name."""


# ===--- Contributors ---=== #


_CONTRIBUTOR_RE = re.compile(r"^(?P<name>[^<>]*?)\s*<(?P<url>[^<>]+)>$")
_GITHUB_PROFILE_RE = re.compile(r"^https://github\.com/(?P<user>[^/\s?#]+)/?$")


@dataclass(frozen=True)
class Contributor:
    name: str
    url: str
    github_username: str | None = None


def parse_contributor(token: str) -> Contributor:
    """Parse one `Name <url>` entry of the "Definitions by" line.

    The GitHub username is filled in only for `https://github.com/<user>`
    urls; a trailing slash is dropped from both the username and the stored
    url. Any other url is kept verbatim with no username.

    Args:
        token: A single contributor entry, without its separating comma.

    Returns:
        Parsed Contributor.

    Raises:
        HeaderParseError: If the entry has no `<url>` part or an empty name.
    """
    match = _CONTRIBUTOR_RE.match(token.strip())
    if match is None or not match.group("name").strip():
        raise HeaderParseError(
            "MALFORMED_CONTRIBUTOR",
            f"Malformed contributor entry: '{token}'",
            expected=("<name> <<url>>",),
            suggestion="Write contributors as: Jane Doe <https://github.com/janedoe>",
            line=token,
        )

    name = match.group("name").strip()
    url = match.group("url").strip()
    github = _GITHUB_PROFILE_RE.match(url)
    if github is None:
        return Contributor(name=name, url=url)
    username = github.group("user")
    return Contributor(
        name=name, url=f"https://github.com/{username}", github_username=username
    )


# ===--- Header grammar ---=== #


@dataclass(frozen=True)
class HeaderRecord:
    """Structured content of a type definition header.

    Attributes:
        library_name: Name of the typed library, e.g. "foo".
        library_major_version: Major version from the title line.
        library_minor_version: Minor version from the title line.
        typescript_version: Minimum TypeScript version; the registry's oldest
            entry when the header has no version line.
        non_npm: True when the title says "non-npm package".
        projects: Project urls in header order.
        contributors: Contributors in header order.
    """

    library_name: str
    library_major_version: int
    library_minor_version: int
    typescript_version: str
    non_npm: bool
    projects: tuple[str, ...]
    contributors: tuple[Contributor, ...]

    def to_json_dict(self) -> dict[str, object]:
        """Return the record keyed the way package manifests spell it."""
        return {
            "libraryName": self.library_name,
            "libraryMajorVersion": self.library_major_version,
            "libraryMinorVersion": self.library_minor_version,
            "typeScriptVersion": self.typescript_version,
            "nonNpm": self.non_npm,
            "projects": list(self.projects),
            "contributors": [
                {
                    "name": contributor.name,
                    "url": contributor.url,
                    "githubUsername": contributor.github_username,
                }
                for contributor in self.contributors
            ],
        }


_EXPECTED_TITLE = "// Type definitions for [non-npm package ]<name> <major>.<minor>"
_EXPECTED_PROJECT = "// Project: <url>[, <url>]..."
_EXPECTED_CONTRIBUTORS = "// Definitions by: <name> <<url>>[, <name> <<url>>]..."
_EXPECTED_DEFINITIONS = f"// Definitions: {DEFINITELY_TYPED_URL}"
_EXPECTED_VERSION_LINE = "// [Minimum ]TypeScript Version: <major>.<minor>"

_TITLE_RE = re.compile(r"^\s*//\s*Type definitions for\b\s*(?P<body>.*?)\s*$")
_NON_NPM_RE = re.compile(r"^non-npm package\s+")
_PROJECT_RE = re.compile(r"^(?P<lead>\s*//\s*Project:\s*)(?P<body>.*?)\s*$")
_CONTRIBUTORS_RE = re.compile(
    r"^(?P<lead>\s*//\s*Definitions by:\s*)(?P<body>.*?)\s*$"
)
_CONTINUATION_RE = re.compile(r"^(?P<lead>\s*//\s*)(?P<body>\S.*?)\s*$")
_DEFINITIONS_RE = re.compile(r"^\s*//\s*Definitions:\s*(?P<body>.*?)\s*$")
_VERSION_LINE_PREFIX_RE = re.compile(r"^\s*//\s*(?:Minimum\s+)?TypeScript Version:")
_VERSION_LINE_RE = re.compile(
    r"^\s*//\s*(?:Minimum\s+)?TypeScript Version:\s*(?P<version>\S+)\s*$"
)
_LABELLED_LINE_RE = re.compile(
    r"^\s*//\s*(?:Type definitions for\b|Project:|Definitions by:|Definitions:"
    r"|(?:Minimum\s+)?TypeScript Version:)"
)
_CONTRIBUTOR_SEPARATOR_RE = re.compile(r"(?<=>)\s*,")


@dataclass(frozen=True)
class _Entry:
    """One comma-separated item of a list line, with where it came from."""

    text: str
    line: str
    line_number: int


def _split_projects(body: str) -> list[str]:
    return [piece.strip() for piece in body.split(",")]


def _split_contributors(body: str) -> list[str]:
    return [piece.strip() for piece in _CONTRIBUTOR_SEPARATOR_RE.split(body)]


def _require_line(lines: Sequence[str], index: int, expected: str) -> str:
    if index < len(lines):
        return lines[index]
    raise HeaderParseError(
        "MISSING_LINE",
        f"Header ends after line {len(lines)}; missing line: {expected}",
        expected=(expected,),
        line="",
        line_number=index + 1,
    )


def _missing_line(raw: str, index: int, expected: str) -> HeaderParseError:
    return HeaderParseError(
        "MISSING_LINE",
        f"Line {index + 1} is not the expected header line: '{raw}'",
        expected=(expected,),
        line=raw,
        line_number=index + 1,
    )


def _parse_title(raw: str, index: int) -> tuple[str, int, int, bool]:
    match = _TITLE_RE.match(raw)
    if match is None:
        raise _missing_line(raw, index, _EXPECTED_TITLE)

    body = match.group("body")
    non_npm_match = _NON_NPM_RE.match(body)
    if non_npm_match is not None:
        body = body[non_npm_match.end() :]

    name, _, version_token = body.rpartition(" ")
    name = name.strip()
    version = _VERSION_ID_RE.match(version_token)
    if not name or version is None:
        raise HeaderParseError(
            "MALFORMED_TITLE",
            f"Could not parse library name and version: line is '{raw}'",
            expected=(_EXPECTED_TITLE,),
            suggestion="End the title with the library's major.minor version, e.g. 'foo 1.2'.",
            line=raw,
            line_number=index + 1,
        )
    return name, int(version.group(1)), int(version.group(2)), non_npm_match is not None


def _aligned_continuation(
    lines: Sequence[str], index: int, column: int
) -> str | None:
    """Return the body of lines[index] if it continues a list at `column`."""
    if index >= len(lines) or _LABELLED_LINE_RE.match(lines[index]):
        return None
    match = _CONTINUATION_RE.match(lines[index])
    if match is None or len(match.group("lead")) != column:
        return None
    return match.group("body")


def _parse_list_line(
    lines: Sequence[str],
    index: int,
    pattern: re.Pattern[str],
    code: str,
    expected: str,
    split: Callable[[str], list[str]],
) -> tuple[list[_Entry], int]:
    """Read one logical list line, following its continuation lines.

    A continuation line puts its first entry at the same column as the first
    entry of the logical line. After a trailing comma the next line must be
    such a continuation; without one, an aligned line still continues the
    list unless it is a labelled header line.

    Returns:
        The entries in order, and the index of the first unread line.
    """
    raw = _require_line(lines, index, expected)
    match = pattern.match(raw)
    if match is None:
        raise _missing_line(raw, index, expected)

    column = len(match.group("lead"))
    body = match.group("body")
    entries: list[_Entry] = []
    while True:
        pieces = split(body)
        continues = len(pieces) > 1 and not pieces[-1]
        if continues:
            pieces.pop()
        if not all(pieces):
            raise HeaderParseError(
                code,
                f"Empty entry in comma-separated list: line is '{raw}'",
                expected=(expected,),
                line=raw,
                line_number=index + 1,
            )
        entries.extend(_Entry(piece, raw, index + 1) for piece in pieces)
        if not continues:
            aligned = _aligned_continuation(lines, index + 1, column)
            if aligned is None:
                return entries, index + 1
            index += 1
            raw = lines[index]
            body = aligned
            continue

        index += 1
        if index >= len(lines):
            raise HeaderParseError(
                "BAD_CONTINUATION",
                f"Line {index} ends with ',' but the header ends there",
                expected=(f"a continuation line indented to column {column}",),
                line="",
                line_number=index + 1,
            )
        raw = lines[index]
        continuation = _CONTINUATION_RE.match(raw)
        if continuation is None or len(continuation.group("lead")) != column:
            raise HeaderParseError(
                "BAD_CONTINUATION",
                f"Continuation line must start at column {column}: line is '{raw}'",
                expected=(f"a continuation line indented to column {column}",),
                suggestion="Align wrapped entries under the first entry of the line.",
                line=raw,
                line_number=index + 1,
            )
        body = continuation.group("body")


def _parse_projects(lines: Sequence[str], index: int) -> tuple[tuple[str, ...], int]:
    entries, index = _parse_list_line(
        lines, index, _PROJECT_RE, "MALFORMED_PROJECT", _EXPECTED_PROJECT, _split_projects
    )
    for entry in entries:
        if any(char.isspace() for char in entry.text):
            raise HeaderParseError(
                "MALFORMED_PROJECT",
                f"Project url contains whitespace: '{entry.text}' in line '{entry.line}'",
                expected=(_EXPECTED_PROJECT,),
                suggestion="Separate project urls with commas.",
                line=entry.line,
                line_number=entry.line_number,
            )
    return tuple(entry.text for entry in entries), index


def _parse_contributors(
    lines: Sequence[str], index: int, strict: bool
) -> tuple[tuple[Contributor, ...], int]:
    entries, index = _parse_list_line(
        lines,
        index,
        _CONTRIBUTORS_RE,
        "MALFORMED_CONTRIBUTOR",
        _EXPECTED_CONTRIBUTORS,
        _split_contributors,
    )
    contributors: list[Contributor] = []
    for entry in entries:
        try:
            contributor = parse_contributor(entry.text)
        except HeaderParseError as err:
            raise HeaderParseError(
                "MALFORMED_CONTRIBUTOR",
                f"{err.message} in line '{entry.line}'",
                expected=(_EXPECTED_CONTRIBUTORS,),
                suggestion=err.suggestion,
                line=entry.line,
                line_number=entry.line_number,
            ) from err
        if strict and contributor.github_username is None:
            raise HeaderParseError(
                "MALFORMED_CONTRIBUTOR",
                f"Contributor url is not a GitHub profile: '{entry.text}' in line '{entry.line}'",
                expected=("<name> <https://github.com/<username>>",),
                line=entry.line,
                line_number=entry.line_number,
            )
        contributors.append(contributor)
    return tuple(contributors), index


def _parse_definitions(lines: Sequence[str], index: int) -> int:
    raw = _require_line(lines, index, _EXPECTED_DEFINITIONS)
    match = _DEFINITIONS_RE.match(raw)
    if match is None:
        raise _missing_line(raw, index, _EXPECTED_DEFINITIONS)
    if match.group("body").rstrip("/") != DEFINITELY_TYPED_URL:
        raise HeaderParseError(
            "MALFORMED_DEFINITIONS",
            f"Definitions line must point at {DEFINITELY_TYPED_URL}: line is '{raw}'",
            expected=(_EXPECTED_DEFINITIONS,),
            line=raw,
            line_number=index + 1,
        )
    return index + 1


def _parse_version_line(
    line: str, line_number: int | None, registry: VersionRegistry
) -> str:
    match = _VERSION_LINE_RE.match(line)
    if match is None or _VERSION_ID_RE.match(match.group("version")) is None:
        raise HeaderParseError(
            "MALFORMED_VERSION_LINE",
            f"Could not parse version: line is '{line}'",
            expected=(_EXPECTED_VERSION_LINE,),
            line=line,
            line_number=line_number,
        )
    version = match.group("version")
    if not registry.is_version_id(version):
        raise InvalidVersion(
            f"Could not parse version: line is '{line}'",
            f"Use a version from {registry.oldest} to {registry.newest}.",
            line=line,
            line_number=line_number,
        )
    return version


def parse_typescript_version_line(
    line: str, registry: VersionRegistry | None = None
) -> str:
    """Return the version id named by a single `TypeScript Version` line.

    Accepts both "// TypeScript Version: X.Y" and
    "// Minimum TypeScript Version: X.Y".

    Raises:
        HeaderParseError: If the line does not have that shape.
        InvalidVersion: If the version is not a known TypeScript version. The
            message quotes the line verbatim.
    """
    if registry is None:
        registry = TYPESCRIPT_VERSIONS
    return _parse_version_line(line, None, registry)


def parse_header(
    text: str, strict: bool = False, registry: VersionRegistry | None = None
) -> HeaderRecord:
    """Parse the header block at the top of a type definition file.

    Expected lines, in order:
        // Type definitions for [non-npm package ]<name> <major>.<minor>
        // Project: <url>, <url>
        // Definitions by: <name> <<url>>, <name> <<url>>
        // Definitions: https://github.com/DefinitelyTyped/DefinitelyTyped
        // [Minimum ]TypeScript Version: <major>.<minor>   (optional)

    Project and contributor lists may wrap onto following comment lines
    aligned under the first entry, with or without a trailing ','. Leading blank
    lines are skipped; everything after the block is ignored.

    Args:
        text: Decoded file content with "\\n" line separators.
        strict: Also require every contributor url to be a GitHub profile.
        registry: Version registry to validate against. Defaults to
            TYPESCRIPT_VERSIONS.

    Returns:
        The parsed HeaderRecord.

    Raises:
        HeaderParseError: If a required line is missing or malformed.
        InvalidVersion: If the version line names an unknown version.
    """
    if registry is None:
        registry = TYPESCRIPT_VERSIONS
    lines = text.split("\n")

    index = 0
    while index < len(lines) and not lines[index].strip():
        index += 1

    raw = _require_line(lines, index, _EXPECTED_TITLE)
    name, major, minor, non_npm = _parse_title(raw, index)
    projects, index = _parse_projects(lines, index + 1)
    contributors, index = _parse_contributors(lines, index, strict)
    index = _parse_definitions(lines, index)

    # Oldest catalogue entry, not lowest_supported as some DefinitelyTyped tools use.
    typescript_version = registry.oldest
    if index < len(lines) and _VERSION_LINE_PREFIX_RE.match(lines[index]):
        typescript_version = _parse_version_line(lines[index], index + 1, registry)

    return HeaderRecord(
        library_name=name,
        library_major_version=major,
        library_minor_version=minor,
        typescript_version=typescript_version,
        non_npm=non_npm,
        projects=projects,
        contributors=contributors,
    )


def parse_header_or_fail(
    text: str, registry: VersionRegistry | None = None
) -> HeaderRecord:
    """Parse a header leniently, raising HeaderError on any failure."""
    return parse_header(text, strict=False, registry=registry)


def validate_header(
    text: str, registry: VersionRegistry | None = None
) -> HeaderError | None:
    """Strictly parse a header and return the failure instead of raising.

    Returns:
        None when the header is valid, otherwise the HeaderParseError or
        InvalidVersion describing the first problem.
    """
    try:
        parse_header(text, strict=True, registry=registry)
    except (HeaderParseError, InvalidVersion) as err:
        return err
    return None


# ===--- typesVersions ---=== #


def make_types_versions_for_package_json(
    versions: Iterable[str], registry: VersionRegistry | None = None
) -> dict[str, dict[str, list[str]]] | None:
    """Build the `typesVersions` table for a package with per-version folders.

    Each version `v` gets a range key that matches compilers older than the
    release after `v`, redirecting them to the `ts<v>/` folder:
        {"<4.4.0-0": {"*": ["ts4.3/*"]}}

    Keys are emitted oldest to newest whatever the input order. The newest
    known version never gets an entry, since its range would match every
    compiler. Duplicate versions collapse onto the same key.

    Args:
        versions: Version ids that have a dedicated `ts<version>/` folder.
        registry: Version registry to validate against. Defaults to
            TYPESCRIPT_VERSIONS.

    Returns:
        The table, or None when `versions` is empty.

    Raises:
        InvalidVersion: If any version is not in the registry.
        RedirectTooNew: If the newest known version is the only one given.
    """
    if registry is None:
        registry = TYPESCRIPT_VERSIONS
    requested = tuple(versions)
    if not requested:
        return None

    ordered = sorted(requested, key=registry.sort_key)
    if all(version == registry.newest for version in ordered):
        raise RedirectTooNew(
            f"{TAG_PREFIX}{registry.newest} is too new: it covers all versions of typescript",
            "Move the newest definitions to the package root instead of a ts folder.",
        )

    table: dict[str, dict[str, list[str]]] = {}
    for version in ordered:
        upper = registry.next_version(version)
        if upper is None:
            continue
        table[f"<{upper}.0-0"] = {"*": [f"{TAG_PREFIX}{version}/*"]}
    return table


# ===--- Reporting ---=== #


def render_expected(expected: Sequence[str]) -> str:
    """Render what the parser expected: one line, or "one of" a list."""
    if len(expected) == 1:
        return expected[0]
    return "one of\n\t" + "\n\t".join(expected)


def format_header_error(err: HeaderError) -> str:
    """Return a printable report for a header or version failure.

    Output format:
        Header error [MALFORMED_TITLE] line 1: Could not parse ...
        Expected: // Type definitions for [non-npm package ]<name> <major>.<minor>
        Hint: End the title with ...
    """
    location = f" line {err.line_number}" if err.line_number is not None else ""
    lines = [f"Header error [{err.code}]{location}: {err.message}"]
    expected = getattr(err, "expected", ())
    if expected:
        lines.append(f"Expected: {render_expected(expected)}")
    if err.suggestion:
        lines.append(f"Hint: {err.suggestion}")
    return "\n".join(lines) + "\n"


def format_header_summary(record: HeaderRecord) -> str:
    """Return a short human-readable summary of a parsed header."""
    title = (
        f"{record.library_name} "
        f"{record.library_major_version}.{record.library_minor_version}"
    )
    if record.non_npm:
        title += " (non-npm)"

    names: list[str] = []
    for contributor in record.contributors:
        if contributor.github_username:
            names.append(f"{contributor.name} (@{contributor.github_username})")
        else:
            names.append(contributor.name)

    lines = [
        title,
        f"  TypeScript: {record.typescript_version}",
        f"  Projects: {', '.join(record.projects)}",
        f"  Contributors: {', '.join(names)}",
    ]
    return "\n".join(lines) + "\n"
