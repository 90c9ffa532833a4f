import logging

import scriptpdf.headers as headers
import scriptpdf.pml as pml

log = logging.getLogger(__name__)

# used to iteratively add PML pages to a document. keeps track of the
# page being drawn on and the vertical position on it, and starts new
# pages whenever the next line would not fit above the bottom margin.
#
# new pages are only created once something is actually drawn on them or
# after them, so space added at the end of the script never produces an
# empty page, while pages left blank in the middle of it are kept.
class Pager:
    def __init__(self, cfg):
        self.cfg = cfg
        self.doc = pml.Document(cfg.paperWidth, cfg.paperHeight)

        self.headers = headers.Headers()
        self.headers.addDefaults()

        # height of one line, in mm
        self.chY = cfg.getLineHeight()

        # how many lines fit between the margins
        self.linesPerPage = cfg.getLinesPerPage()

        # index of the last page created, 0 being the title page
        self.pageIndex = 0

        # number of content (non-title) pages created
        self.contentPages = 0

        # page being drawn on, or None if the next line starts a new page
        self.pg = None

        # pages that were broken while still blank. they are only created
        # once something is drawn after them.
        self.blankPages = 0

        # vertical position on the current page, in lines counted from the
        # top margin
        self.y = 0

    # current vertical position in mm from the top of the page
    def getY(self):
        return self.cfg.marginTop + self.y * self.chY

    # add a new content page to the document and select it as current.
    # the vertical position is not touched.
    def newPage(self):
        cfg = self.cfg

        self.pg = pml.Page(self.doc)
        self.doc.add(self.pg)

        self.pageIndex = len(self.doc.pages) - 1
        self.contentPages += 1

        # the title page and the first page of the script proper are not
        # numbered, the second page of the script is "1." and so on.
        if self.pageIndex >= 2:
            nr = str(self.pageIndex - 1)

            self.pg.pageNumber = self.headers.getText(nr)
            self.headers.generatePML(self.pg, nr, cfg)

        if cfg.pdfShowMargins:
            lx = cfg.marginLeft
            rx = cfg.paperWidth - cfg.marginRight
            uy = cfg.marginTop
            dy = cfg.paperHeight - cfg.marginBottom

            self.pg.add(pml.LineOp([(lx, uy), (rx, uy), (rx, dy), (lx, dy)],
                                   0, True))

        log.debug("started page %d", self.pageIndex)

    # end the current page. whatever is drawn next goes to the top of a
    # new page.
    def breakPage(self):
        if self.pg is None:
            self.blankPages += 1

        self.pg = None
        self.y = 0

    # add 'lines' empty lines. if they don't fit on the current page, the
    # page is ended instead.
    def addSpace(self, lines):
        if (self.y + lines) > self.linesPerPage:
            self.breakPage()
        else:
            self.y += lines

    # draw a single line of text at the position given by 'rule' and
    # advance by one line, starting a new page first if needed. 'line' is
    # the index of the source line. returns the created pml.TextOp.
    def addLine(self, text, rule, line = -1):
        if (self.y + 1) > self.linesPerPage:
            self.breakPage()

        if self.pg is None:
            while self.blankPages:
                self.newPage()
                self.blankPages -= 1

            self.newPage()

        op = pml.TextOp(text, rule.xOffset, self.getY(), self.cfg.fontSize,
                        line = line)
        self.pg.add(op)

        self.y += 1

        return op
