# PML is short for Page Modeling Language, our own neat little PDF-wannabe
# format for expressing a script's complete contents in a neutral way
# that's easy to render to almost anything, e.g. PDF, Postscript, Windows
# GDI, etc.
#

# A PML document is a collection of pages plus possibly some metadata.
# Each page is a collection of simple drawing commands, executed
# sequentially in the order given, assuming "complete overdraw" semantics
# on the output device, i.e. whatever is drawn completely covers things it
# is painted on top of.

# All measurements in PML are in (floating point) millimeters, measured
# from the upper left corner of the page.

from typing import Optional, List, Tuple

import scriptpdf.misc as misc
import scriptpdf.util as util

# name of the font all text is measured with. the PDF may use a different
# (embedded) font, which is then assumed to be fixed width too.
FONT_NAME = "Courier"

# A single document.
class Document:

    # (w, h) is the size of each page.
    def __init__(self, w: float, h: float):
        self.w: float = w
        self.h: float = h

        self.pages: List[Page] = []

        self.tocs: List[TOCItem] = []

        # user-specified font, if any
        self.font: Optional[PDFFontInfo] = None

        # whether to show TOC by default on document open
        self.showTOC: bool = False

        # document title, stored in the PDF metadata
        self.title: str = ""

        self.version: str = misc.version

    def add(self, page: 'Page') -> None:
        self.pages.append(page)

    def addTOC(self, toc: 'TOCItem') -> None:
        self.tocs.append(toc)

    def setFont(self, pfi: 'PDFFontInfo') -> None:
        self.font = pfi

class Page:
    def __init__(self, doc: Document):

        # link to containing document
        self.doc: Document = doc

        # a collection of Operation objects
        self.ops: List['DrawOp'] = []

        # page number shown on this page ("2." etc), or None for unnumbered
        # pages
        self.pageNumber: Optional[str] = None

    def add(self, op: 'DrawOp') -> None:
        self.ops.append(op)

    # return all TextOps on this page
    def getTextOps(self) -> List['TextOp']:
        return [op for op in self.ops if isinstance(op, TextOp)]

# Table of content item (Outline item, in PDF lingo)
class TOCItem:
    def __init__(self, text: str, op: 'TextOp'):
        # text to show in TOC
        self.text: str = text

        # pointer to the TextOp that this item links to (used to get the
        # correct positioning information)
        self.op: TextOp = op

# information about one PDF font
class PDFFontInfo:
    def __init__(self, name: str, filename: str = ""):
        # name to use in generated PDF file ("CourierPrime", "MyFont",
        # etc.). if empty, use the default PDF font.
        self.name: str = name

        # TrueType font file to embed, or empty if the font is already
        # known to the PDF library.
        self.filename: str = filename

# An abstract base class for all drawing operations.
class DrawOp:
    pass

# Draw text string 'text', at position (x, y) mm from the upper left
# corner of the page. Font used is 'size' points.
class TextOp(DrawOp):
    def __init__(self, text: str, x: float, y: float, size: int,
                 align: int = util.ALIGN_LEFT, line: int = -1):
        """
        :param line: index of the source line this text came from, or -1 if some other text (titles, page numbers).
        :param size: the font size
        """
        self.text: str = text
        self.x: float = x
        self.y: float = y
        self.size: int = size

        # TOCItem, by default we have none
        self.toc: Optional[TOCItem] = None

        self.line: int = line

        if align != util.ALIGN_LEFT:
            w = util.getTextWidth(text, FONT_NAME, size)

            if align == util.ALIGN_CENTER:
                self.x -= w / 2.0
            elif align == util.ALIGN_RIGHT:
                self.x -= w

    def __repr__(self) -> str:
        return "TextOp(%r, %.2f, %.2f, %d)" % (self.text, self.x, self.y,
                                               self.size)

# Draw consecutive lines. 'points' is a list of (x, y) pairs (minimum 2
# pairs) and 'width' is the line width, with 0 being the thinnest possible
# line. if 'isClosed' is True, the last point on the list is connected to
# the first one.
class LineOp(DrawOp):
    def __init__(self, points: List[Tuple[float, float]], width: float, isClosed: bool = False):
        self.points: List[Tuple[float, float]] = points
        self.width: float = width
        self.isClosed: bool = isClosed
