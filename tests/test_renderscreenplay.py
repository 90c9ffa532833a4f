import pytest

import scriptpdf
import scriptpdf.error as error
import u

def testRenderScreenplay() -> None:
    data = u.loadString("INT. COFFEE SHOP - DAY\n\nMICHAEL\n"
                        "  I'll have a latte.").generatePDF()

    assert len(data) > 200
    assert data[:8] == b"%PDF-1.5"

def testRenderLongScreenplay() -> None:
    short = scriptpdf.generatePDF("Test", u.actionLines(10))
    data = scriptpdf.generatePDF("Test", u.actionLines(200))

    assert data[:8] == b"%PDF-1.5"
    assert len(data) > len(short)

def testRenderEmpty() -> None:
    data = scriptpdf.generatePDF("", "")

    assert data[:8] == b"%PDF-1.5"

def testRenderWithMargins() -> None:
    cfg = u.cfg()
    cfg.pdfShowMargins = True

    data = u.loadString("Action.", cfg = cfg).generatePDF()

    assert data[:8] == b"%PDF-1.5"

def testRenderWithoutTOC() -> None:
    cfg = u.cfg()
    cfg.pdfIncludeTOC = False
    cfg.pdfShowTOC = False

    data = u.loadString("INT. HOUSE - DAY\nAction.", cfg = cfg).generatePDF()

    assert data[:8] == b"%PDF-1.5"

def testRenderWithStandardFont() -> None:
    cfg = u.cfg()
    cfg.pdfFont.pdfName = "Courier-Bold"

    data = u.loadString("Action.", cfg = cfg).generatePDF()

    assert data[:8] == b"%PDF-1.5"
    assert b"Courier-Bold" in data

def testUnknownFont() -> None:
    cfg = u.cfg()
    cfg.pdfFont.pdfName = "NoSuchFont"

    with pytest.raises(error.FontError):
        u.loadString("Action.", cfg = cfg).generatePDF()

def testMissingFontFile(tmp_path) -> None:
    cfg = u.cfg()
    cfg.pdfFont.pdfName = "MissingFont"
    cfg.pdfFont.filename = str(tmp_path / "missing.ttf")

    with pytest.raises(error.FontError):
        u.loadString("Action.", cfg = cfg).generatePDF()

def testBrokenFontFile(tmp_path) -> None:
    fn = tmp_path / "broken.ttf"
    fn.write_bytes(b"this is not a font" * 20)

    cfg = u.cfg()
    cfg.pdfFont.pdfName = "BrokenFont"
    cfg.pdfFont.filename = str(fn)

    with pytest.raises(error.FontError):
        u.loadString("Action.", cfg = cfg).generatePDF()
