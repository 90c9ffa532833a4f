# -*- coding: utf-8 -*-

import logging

import scriptpdf.classifier as classifier
import scriptpdf.config as config
import scriptpdf.layout as layout
import scriptpdf.mypager as mypager
import scriptpdf.pdf as pdf
import scriptpdf.pml as pml
import scriptpdf.titles as titles
import scriptpdf.util as util

log = logging.getLogger(__name__)

# tabs in the input are expanded to this many spaces
TAB_WIDTH = 4

# one line of input text
class Line:
    def __init__(self, nr, raw):

        # index of the line in the input, 0-based
        self.nr = nr

        # text as given, with tabs expanded
        self.raw = raw

        # text with trailing whitespace removed
        self.text = raw.rstrip()

    # text with leading and trailing whitespace removed
    def stripped(self):
        return self.text.lstrip()

    def __repr__(self):
        return "Line(%d, %r)" % (self.nr, self.raw)

# split 'body' into a list of Lines. any kind of line break is accepted.
def splitLines(body):
    data = util.fixNL(body)

    return [Line(i, s.expandtabs(TAB_WIDTH))
            for i, s in enumerate(data.split("\n"))]

# screenplay
class Screenplay:
    def __init__(self, title, body, cfg = None, author = None):
        self.cfg = cfg or config.Config()

        self.title = title

        # None means use the author from the config
        if author is None:
            author = self.cfg.author

        self.author = author

        self.lines = splitLines(body)

        self.titles = titles.Titles()
        self.titles.addDefaults(title, author, self.cfg)

    # return a list of element kinds, one for each line. each line is
    # classified looking at the line after it.
    def getKinds(self):
        cl = classifier.Classifier.fromConfig(self.cfg)
        ls = self.lines
        ret = []

        for i in range(len(ls)):
            if (i + 1) < len(ls):
                nextLine = ls[i + 1].raw
            else:
                nextLine = None

            ret.append(cl.classify(ls[i].raw, nextLine))

        return ret

    # lay out the whole screenplay and return it as a pml.Document: a
    # title page followed by the script's pages.
    def generatePML(self):
        cfg = self.cfg

        pager = mypager.Pager(cfg)
        doc = pager.doc

        self.titles.generatePages(doc)

        doc.title = self.title
        doc.showTOC = cfg.pdfShowTOC

        if cfg.pdfFont.pdfName:
            doc.setFont(pml.PDFFontInfo(cfg.pdfFont.pdfName,
                                        cfg.pdfFont.filename))

        rules = layout.LayoutTable(cfg)

        for line, lt in zip(self.lines, self.getKinds()):
            if lt == classifier.EMPTY:
                pager.addSpace(1)

                continue

            rule = rules.layoutFor(lt)

            if rule.preSpacingLines:
                pager.addSpace(rule.preSpacingLines)

            text = line.stripped()

            if rule.forceUppercase:
                text = util.upper(text)

            isFirst = True

            for s in layout.wrap(text, rule.maxWidthChars):
                to = pager.addLine(s, rule, line.nr)

                if isFirst and (lt == classifier.SCENE) and \
                       cfg.pdfIncludeTOC:
                    to.toc = pml.TOCItem(text, to)
                    doc.addTOC(to.toc)

                isFirst = False

        log.debug("laid out %d lines on %d content pages", len(self.lines),
                  pager.contentPages)

        return doc

    # render the screenplay and return the PDF data. raises
    # error.FontError if the configured font can't be used.
    def generatePDF(self):
        return pdf.generate(self.generatePML())

# lay out given screenplay text and return it as a pml.Document.
def generatePML(title, body, cfg = None, author = None):
    return Screenplay(title, body, cfg, author).generatePML()

# render given screenplay text as PDF and return the PDF data.
def generatePDF(title, body, cfg = None, author = None):
    return Screenplay(title, body, cfg, author).generatePDF()
