from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def _write_pdf(path: Path, pages: list[list[str]]) -> None:
    """Creates a deterministic PDF, one list of lines per page."""
    c = canvas.Canvas(str(path), pagesize=A4)
    width, height = A4

    for lines in pages:
        text = c.beginText(40, height - 50)
        for line in lines:
            text.textLine(line)
        c.drawText(text)
        c.showPage()

    c.save()


BUY_CONFIRMATION = [
    [
        "EXAMPLE BANK AG",
        "   Wertpapierabrechnung Kauf   ",
        "",
        "ISIN US0378331005",
        "Stueck 10",
        "Kurs 150,25 EUR",
    ],
    [
        "Seite 2",
        "",
        "Provision 1,00 EUR",
    ],
]


@pytest.fixture(scope="module")
def statement_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test statements once per module."""
    dir_path: Path = tmp_path_factory.mktemp("statements")

    _write_pdf(dir_path / "buy.pdf", BUY_CONFIRMATION)
    _write_pdf(dir_path / "blank_second_page.pdf", [["EXAMPLE BANK AG"], []])

    (dir_path / "depot.csv").write_text(
        "\ufeffDate;Type;ISIN;Shares;Price\r\n"
        "2023-01-02;Buy;US0378331005;10;150.25\r\n"
        "\r\n"
        "  2023-02-01;Sell;US0378331005;5;160.00  \r\n",
        encoding="utf-8",
    )
    (dir_path / "latin1.csv").write_bytes("Datum;Betrag\n02.01.2023;100 €".encode("cp1252"))
    (dir_path / "broken.pdf").write_bytes(b"this is not a pdf")
    (dir_path / "notes.txt").write_text("just some notes")

    return dir_path
