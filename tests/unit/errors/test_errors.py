import pytest

from activity_importer.errors import (
    ActivityValidationError,
    DocumentError,
    ExtractionError,
    ImporterError,
    ParserError,
    Status,
)


def test_status_codes_are_stable() -> None:
    assert [int(s) for s in Status] == [0, 1, 2, 3, 4, 5, 6, 7]
    assert Status.UNSUPPORTED_EXTENSION == 4
    assert Status.IGNORED_DOCUMENT == 7


def test_document_error_carries_file_name_and_status() -> None:
    error = DocumentError("Invalid document.", "statement.pdf", Status.AMBIGUOUS_IMPLEMENTATION)

    assert str(error) == "Invalid document.\nFile: statement.pdf"
    assert error.status == 2
    assert error.data == {"status": 2}
    assert error.file_name == "statement.pdf"


def test_ignored_document_is_a_document_error() -> None:
    error = DocumentError("Cost information sheet", "info.pdf", Status.IGNORED_DOCUMENT)
    assert isinstance(error, ImporterError)
    assert error.status == 7


def test_extraction_error_reports_status_one() -> None:
    error = ExtractionError("Failed to parse PDF", "broken.pdf")

    assert isinstance(error, DocumentError)
    assert error.status == Status.NO_IMPLEMENTATION


def test_parser_error_defaults_to_status_three() -> None:
    error = ParserError("Unable to parse number", "1.2.3,4")

    assert str(error) == "Unable to parse number\nInput: 1.2.3,4"
    assert error.status == 3
    assert error.value == "1.2.3,4"


def test_activity_validation_error_marks_missing_values() -> None:
    error = ActivityValidationError(
        "Missing shares", {"type": "Buy", "shares": None}, Status.INVALID_ACTIVITIES
    )

    message = str(error)
    assert message.startswith("Missing shares\nActivity: {")
    assert '"shares": ">>>  undefined  <<<"' in message
    assert '"type": "Buy"' in message
    assert error.status == 6


def test_errors_can_be_caught_by_base_class() -> None:
    with pytest.raises(ImporterError) as exc_info:
        raise ParserError("bad", "x")
    assert exc_info.value.data == {"status": 3}
