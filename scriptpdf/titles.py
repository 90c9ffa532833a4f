import scriptpdf.pml as pml
import scriptpdf.util as util

# a script's title pages.
class Titles:

    def __init__(self):
        # list of lists of TitleString objects
        self.pages = []

    # create the standard title page: title, "by" and author, centered
    # horizontally, a little above the middle of the page.
    def addDefaults(self, title, author, cfg):
        a = []

        y = cfg.paperHeight / 2.0 - 30.0
        a.append(TitleString([util.upper(title)], y, cfg.titleFontSize))

        if author:
            y += util.getTextHeight(cfg.titleFontSize) + util.INCH * 0.5
            a.append(TitleString(["by"], y, cfg.fontSize))

            y += util.getTextHeight(cfg.fontSize) + util.INCH * 0.2
            a.append(TitleString([author], y, cfg.authorFontSize))

        self.pages.append(a)

    # add title pages to doc.
    def generatePages(self, doc):
        for page in self.pages:
            pg = pml.Page(doc)

            for s in page:
                s.generatePML(pg)

            doc.add(pg)

# a single string displayed on a title page, centered horizontally
class TitleString:
    def __init__(self, items, y = 0.0, size = 12):

        # list of text strings
        self.items = items

        # vertical position of the first line
        self.y = y

        # size in points
        self.size = size

    def generatePML(self, page):
        y = self.y
        x = page.doc.w / 2.0

        for line in self.items:
            page.add(pml.TextOp(line, x, y, self.size, util.ALIGN_CENTER))

            y += util.getTextHeight(self.size)
