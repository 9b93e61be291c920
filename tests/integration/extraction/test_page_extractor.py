import io
from pathlib import Path

import pytest

from activity_importer.errors import ExtractionError
from activity_importer.extraction import PageExtractor
from activity_importer.models import ParsedFile

pytestmark = pytest.mark.integration


# --- PDF ---


@pytest.mark.asyncio
async def test_pdf_yields_one_page_per_physical_page(statement_dir: Path) -> None:
    parsed = await PageExtractor().extract(statement_dir / "buy.pdf", "buy.pdf", "pdf")

    assert isinstance(parsed, ParsedFile)
    assert parsed.extension == "pdf"
    assert len(parsed.pages) == 2


@pytest.mark.asyncio
async def test_pdf_fragments_are_trimmed_and_non_empty(statement_dir: Path) -> None:
    parsed = await PageExtractor().extract(statement_dir / "buy.pdf", "buy.pdf", "pdf")

    first, second = parsed.pages
    assert first[0] == "EXAMPLE BANK AG"
    assert "Wertpapierabrechnung Kauf" in first
    assert "ISIN US0378331005" in first
    assert "Provision 1,00 EUR" in second
    for page in parsed.pages:
        assert all(fragment == fragment.strip() and fragment for fragment in page)


@pytest.mark.asyncio
async def test_pdf_keeps_page_order_and_blank_pages(statement_dir: Path) -> None:
    parsed = await PageExtractor().extract(
        statement_dir / "blank_second_page.pdf", "blank_second_page.pdf", "pdf"
    )

    assert parsed.pages == (("EXAMPLE BANK AG",), ())


@pytest.mark.asyncio
async def test_pdf_from_bytes_and_file_object(statement_dir: Path) -> None:
    path = statement_dir / "buy.pdf"
    extractor = PageExtractor()

    from_bytes = await extractor.extract(path.read_bytes(), "buy.pdf", "pdf")
    with open(path, "rb") as f:
        from_file = await extractor.extract(f, "buy.pdf", "PDF")

    assert from_bytes == from_file


@pytest.mark.asyncio
async def test_extraction_is_deterministic(statement_dir: Path) -> None:
    extractor = PageExtractor()
    path = statement_dir / "buy.pdf"

    first = await extractor.extract(path, "buy.pdf", "pdf")
    second = await extractor.extract(path, "buy.pdf", "pdf")

    assert first == second


@pytest.mark.asyncio
async def test_invalid_pdf_raises_extraction_error(statement_dir: Path) -> None:
    with pytest.raises(ExtractionError) as exc_info:
        await PageExtractor().extract(statement_dir / "broken.pdf", "broken.pdf", "pdf")

    assert exc_info.value.status == 1


# --- CSV ---


@pytest.mark.asyncio
async def test_csv_is_a_single_page_of_trimmed_lines(statement_dir: Path) -> None:
    parsed = await PageExtractor().extract(statement_dir / "depot.csv", "depot.csv", "csv")

    assert parsed.extension == "csv"
    assert parsed.pages == (
        (
            "Date;Type;ISIN;Shares;Price",
            "2023-01-02;Buy;US0378331005;10;150.25",
            "2023-02-01;Sell;US0378331005;5;160.00",
        ),
    )


@pytest.mark.asyncio
async def test_csv_that_is_not_utf8_raises_extraction_error(statement_dir: Path) -> None:
    with pytest.raises(ExtractionError, match="not valid UTF-8"):
        await PageExtractor().extract(statement_dir / "latin1.csv", "latin1.csv", "csv")


# --- Limits and I/O ---


@pytest.mark.asyncio
async def test_missing_file_raises_extraction_error(tmp_path: Path) -> None:
    with pytest.raises(ExtractionError, match="Failed to read file"):
        await PageExtractor().extract(tmp_path / "missing.csv", "missing.csv", "csv")


@pytest.mark.asyncio
async def test_oversized_file_is_rejected() -> None:
    extractor = PageExtractor(max_file_size_mb=0.001)

    with pytest.raises(ExtractionError, match="File too large"):
        await extractor.extract(b"x" * 2048, "big.csv", "csv")


@pytest.mark.asyncio
async def test_closed_file_object_raises_extraction_error() -> None:
    buffer = io.BytesIO(b"Date\n1")
    buffer.close()

    with pytest.raises(ExtractionError, match="Failed to read file") as exc_info:
        await PageExtractor().extract(buffer, "closed.csv", "csv")

    assert exc_info.value.status == 1
