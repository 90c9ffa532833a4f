import pytest

import scriptpdf.classifier as cl
import scriptpdf.config as config
import scriptpdf.error as error
import u

# test config.Config

def testDefaults():
    cfg = u.cfg()

    assert cfg.fontSize == 12
    assert cfg.paperWidth == 215.9
    assert cfg.paperHeight == 279.4
    assert cfg.marginLeft == 38.1
    assert cfg.marginTop == 25.4
    assert cfg.author == "Vadis AI Script Writer"
    assert cfg.pdfIncludeTOC
    assert not cfg.pdfShowMargins
    assert cfg.pdfFont.pdfName == ""

def testLinesPerPage():
    cfg = u.cfg()

    assert cfg.getLinesPerPage() == 54
    assert abs(cfg.getCharWidth() - 2.54) < 0.001
    assert abs(cfg.getLineHeight() - 4.2333) < 0.001

    cfg.fontSize = 24
    assert cfg.getLinesPerPage() == 27

def testNoRoomForText():
    cfg = u.cfg()
    cfg.marginTop = 140.0
    cfg.marginBottom = 139.0

    with pytest.raises(error.ConfigError):
        cfg.getLinesPerPage()

def testGetType():
    cfg = u.cfg()

    assert cfg.getType(cl.UNKNOWN) is cfg.getType(cl.ACTION)
    assert cfg.getType(cl.TRANSITION).indent == 45

    with pytest.raises(error.ConfigError):
        cfg.getType(cl.EMPTY)

def testSaveLoad():
    cfg = u.cfg()
    cfg.fontSize = 10
    cfg.marginLeft = 30.0
    cfg.author = "Jane Doe"
    cfg.pdfShowMargins = True
    cfg.getType(cl.DIALOGUE).width = 40
    cfg.getType(cl.ACTION).isCaps = True
    cfg.pdfFont.pdfName = "MyFont"
    cfg.pdfFont.filename = "/tmp/myfont.ttf"

    s = cfg.save()

    assert "FontSize:10\n" in s
    assert "Margin/Left:30.00\n" in s
    assert "Title/Author:Jane Doe\n" in s
    assert "Element/Dialogue/Width:40\n" in s
    assert "PDF/Font/Name:MyFont\n" in s

    cfg2 = u.cfg()
    cfg2.load(s)

    assert cfg2.fontSize == 10
    assert cfg2.marginLeft == 30.0
    assert cfg2.author == "Jane Doe"
    assert cfg2.pdfShowMargins
    assert cfg2.getType(cl.DIALOGUE).width == 40
    assert cfg2.getType(cl.ACTION).isCaps
    assert not cfg2.getType(cl.DIALOGUE).isCaps
    assert cfg2.pdfFont.pdfName == "MyFont"
    assert cfg2.pdfFont.filename == "/tmp/myfont.ttf"
    assert cfg2.save() == s

def testLoadPartial():
    cfg = u.cfg()
    cfg.load("FontSize:11\r\nunknown line\r\nNo/Such/Setting:5\r\n"
             "  Element/Character/Indent : 20 \n")

    assert cfg.fontSize == 11
    assert cfg.getType(cl.CHARACTER).indent == 20
    assert cfg.marginLeft == 38.1

def testLoadClamps():
    cfg = u.cfg()
    cfg.load("FontSize:1000\nMargin/Top:-5\nElement/Action/Width:1\n"
             "Classifier/DialogueIndent:abc\n")

    assert cfg.fontSize == 72
    assert cfg.marginTop == 0.0
    assert cfg.getType(cl.ACTION).width == 5
    assert cfg.dialogueIndent == 2

def testLoadFontName():
    cfg = u.cfg()
    cfg.load("PDF/Font/Name:My (Bad) Font/Name\n")

    assert cfg.pdfFont.pdfName == "MyBadFontName"

def testLoadFile(tmp_path):
    fn = tmp_path / "my.conf"
    fn.write_text("PDF/ShowTOC:False\nTitle/FontSize:24\n")

    cfg = config.loadFile(str(fn))

    assert not cfg.pdfShowTOC
    assert cfg.titleFontSize == 24

def testLoadFileMissing(tmp_path):
    with pytest.raises(error.ConfigError):
        config.loadFile(str(tmp_path / "nosuchfile.conf"))

def testConfigsAreIndependent():
    cfg = u.cfg()
    cfg.getType(cl.SCENE).width = 20

    assert u.cfg().getType(cl.SCENE).width == 60
