import pytest

import header_parser


def test_header_error_rejects_unknown_code() -> None:
    with pytest.raises(ValueError, match="Unknown header error code"):
        header_parser.HeaderError("NOT_A_CODE", "message")


def test_header_parse_error_rejects_non_parse_code() -> None:
    with pytest.raises(ValueError, match="Not a header parse error code"):
        header_parser.HeaderParseError("INVALID_VERSION", "message")


@pytest.mark.parametrize(
    ("err", "code"),
    [
        (header_parser.HeaderParseError("MISSING_LINE", "m"), "MISSING_LINE"),
        (header_parser.InvalidVersion("m"), "INVALID_VERSION"),
        (header_parser.RedirectTooNew("m"), "REDIRECT_TOO_NEW"),
    ],
)
def test_error_kinds_share_base_and_codes(
    err: header_parser.HeaderError, code: str
) -> None:
    assert isinstance(err, header_parser.HeaderError)
    assert err.code == code
    assert err.code in header_parser.VALID_ERROR_CODES
    assert str(err) == "m"


def test_render_expected_single_and_many() -> None:
    assert header_parser.render_expected(["a"]) == "a"
    assert header_parser.render_expected(["a", "b"]) == "one of\n\ta\n\tb"


def test_format_header_error_includes_location_expected_and_hint() -> None:
    err = header_parser.HeaderParseError(
        "MALFORMED_TITLE",
        "Could not parse library name and version: line is '// Type definitions for foo'",
        expected=("// Type definitions for <name> <major>.<minor>",),
        suggestion="Add a version.",
        line="// Type definitions for foo",
        line_number=1,
    )

    assert header_parser.format_header_error(err) == (
        "Header error [MALFORMED_TITLE] line 1: Could not parse library name and "
        "version: line is '// Type definitions for foo'\n"
        "Expected: // Type definitions for <name> <major>.<minor>\n"
        "Hint: Add a version.\n"
    )


def test_format_header_error_without_location() -> None:
    err = header_parser.RedirectTooNew("ts5.0 is too new")

    assert header_parser.format_header_error(err) == (
        "Header error [REDIRECT_TOO_NEW]: ts5.0 is too new\n"
    )


def test_format_header_error_for_real_parse_failure() -> None:
    err = header_parser.validate_header("// Type definitions for foo 1.2\n// Nope")

    assert err is not None
    output = header_parser.format_header_error(err)
    assert output.startswith("Header error [MISSING_LINE] line 2:")
    assert "Expected: // Project:" in output


def test_format_header_summary() -> None:
    record = header_parser.HeaderRecord(
        library_name="foo",
        library_major_version=1,
        library_minor_version=2,
        typescript_version="4.2",
        non_npm=True,
        projects=("https://foo.com", "https://bar.com"),
        contributors=(
            header_parser.Contributor("My Self", "https://github.com/me", "me"),
            header_parser.Contributor("Bad Url", "sptth://hubgit.moc/em"),
        ),
    )

    assert header_parser.format_header_summary(record) == (
        "foo 1.2 (non-npm)\n"
        "  TypeScript: 4.2\n"
        "  Projects: https://foo.com, https://bar.com\n"
        "  Contributors: My Self (@me), Bad Url\n"
    )
