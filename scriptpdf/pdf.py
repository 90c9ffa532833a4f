import logging
import uuid
from typing import Dict, Tuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont, TTFError
from reportlab.pdfgen.canvas import Canvas

import scriptpdf.error as error
import scriptpdf.misc as misc
import scriptpdf.pml as pml

log = logging.getLogger(__name__)

# users should only use this.
def generate(doc: 'pml.Document') -> bytes:
    tmp = PDFExporter(doc)
    return tmp.generate()

# An abstract base class for all PDF drawing operations.
class PDFDrawOp:

    # draw the PML object pmlOp on the canvas. pe = PDFExporter.
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        raise Exception("draw not implemented")

class PDFTextOp(PDFDrawOp):
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        if not isinstance(pmlOp, pml.TextOp):
            raise Exception("PDFTextOp is only compatible with pml.TextOp, got "+type(pmlOp).__name__)

        # we need to adjust y position since PDF uses baseline of text as
        # the y pos, but pml uses top of the text as y pos. The Adobe
        # standard Courier family font metrics give 157 units in 1/1000
        # point units as the Descender value, thus giving (1000 - 157) =
        # 843 units from baseline to top of text.

        # http://partners.adobe.com/asn/tech/type/ftechnotes.jsp contains
        # the "Font Metrics for PDF Core 14 Fonts" document.

        x = pe.x(pmlOp.x)
        y = pe.y(pmlOp.y) - 0.843 * pmlOp.size

        canvas.setFont(pe.fontName, pmlOp.size)
        canvas.drawString(x, y, pmlOp.text)

        # create bookmark for table of contents if applicable
        if pmlOp.toc:
            bookmarkKey = uuid.uuid4().hex
            canvas.bookmarkHorizontal(bookmarkKey, pe.x(pmlOp.x), pe.y(pmlOp.y))
            canvas.addOutlineEntry(pmlOp.toc.text, bookmarkKey)

class PDFLineOp(PDFDrawOp):
    def draw(self, pmlOp: 'pml.DrawOp', pageNr: int, pe: 'PDFExporter', canvas: Canvas) -> None:
        if not isinstance(pmlOp, pml.LineOp):
            raise Exception("PDFLineOp is only compatible with pml.LineOp, got "+type(pmlOp).__name__)

        points = pmlOp.points
        numberOfPoints = len(points)

        if numberOfPoints < 2:
            log.warning("LineOp contains only %d points", numberOfPoints)

            return

        canvas.setLineWidth(pe.mm2points(pmlOp.width))

        lines = []
        for i in range(0, numberOfPoints - 1):
            lines.append(pe.xy(points[i]) + pe.xy(points[i+1]))

        if pmlOp.isClosed:
            lines.append(pe.xy(points[i+1]) + pe.xy(points[0]))

        canvas.lines(lines)

class PDFExporter:
    # which PDFDrawOp draws which kind of PML operation
    drawOps: Dict[type, PDFDrawOp] = {
        pml.TextOp: PDFTextOp(),
        pml.LineOp: PDFLineOp(),
    }

    def __init__(self, doc: 'pml.Document'):
        self.doc: pml.Document = doc

        # font used for all text, set up by initFont
        self.fontName: str = pml.FONT_NAME

    # generate PDF document and return it as bytes. raises
    # error.FontError if the font can't be set up, in which case nothing
    # is drawn.
    def generate(self) -> bytes:
        doc = self.doc

        self.fontName = self.initFont()

        canvas = Canvas(
            '',
            pdfVersion=(1, 5),
            pagesize=(self.mm2points(doc.w), self.mm2points(doc.h)),
            initialFontName=self.fontName,
        )

        # set PDF info
        version = self.doc.version
        canvas.setCreator(misc.progName + ' ' + version)
        canvas.setProducer(misc.progName + ' ' + version)

        if doc.title:
            canvas.setTitle(doc.title)

        numberOfPages: int = len(doc.pages)

        # draw pages
        for i in range(numberOfPages):
            pg = self.doc.pages[i]
            for op in pg.ops:
                self.drawOps[type(op)].draw(op, i, self, canvas)

            if i < numberOfPages - 1:
                canvas.showPage()

        if doc.showTOC and doc.tocs:
            canvas.showOutline()

        data = canvas.getpdfdata()

        log.debug("generated %d pages, %d bytes of PDF", numberOfPages,
                  len(data))

        return data

    # return font name to use for all text. registers the document's
    # custom font with reportlab if it does not yet exist.
    def initFont(self) -> str:
        customFontInfo = self.doc.font

        if not customFontInfo or not customFontInfo.name:
            return pml.FONT_NAME

        name = customFontInfo.name

        if not customFontInfo.filename:
            if (name in pdfmetrics.standardFonts) or \
                   (name in pdfmetrics.getRegisteredFontNames()):
                return name

            raise error.FontError('Font name "%s" is not known and no font file name provided. Please provide a file name for this font in the settings or use the default font.' % name)

        try:
            pdfmetrics.registerFont(TTFont(name, customFontInfo.filename))
        except (TTFError, OSError, ValueError) as e:
            raise error.FontError('Cannot embed font "%s" from "%s": %s' % (
                name, customFontInfo.filename, e)) from e

        log.debug("registered font %s from %s", name, customFontInfo.filename)

        return name

    # convert mm to points (1/72 inch).
    def mm2points(self, mm: float) -> float:
        # 2.834 = 72 / 25.4
        return mm * 2.83464567

    # convert x coordinate
    def x(self, x: float) -> float:
        return self.mm2points(x)

    # convert y coordinate
    def y(self, y: float) -> float:
        return self.mm2points(self.doc.h - y)

    # convert xy, which is (x, y) pair, into PDF coordinates
    def xy(self, xy: Tuple[float, float]) -> Tuple[float, float]:
        x = self.x(xy[0])
        y = self.y(xy[1])

        return (x, y)
