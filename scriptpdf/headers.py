import scriptpdf.pml as pml
import scriptpdf.util as util

# page headers. by default just the page number, right-aligned at the
# right margin.
class Headers:

    def __init__(self):
        # list of HeaderString objects
        self.hdrs = []

    # create standard headers
    def addDefaults(self):
        h = HeaderString()
        h.text = "${PAGE}."

        self.hdrs.append(h)

    # add headers to given page. 'pageNr' must be a string.
    def generatePML(self, page, pageNr, cfg):
        for h in self.hdrs:
            h.generatePML(page, pageNr, cfg)

    # return the text of the first header for given page number, or None
    # if there are no headers.
    def getText(self, pageNr):
        if not self.hdrs:
            return None

        return self.hdrs[0].getText(pageNr)

# a single header string, ending at the right margin
class HeaderString:
    def __init__(self):

        # contents of string. ${PAGE} is replaced by the page number.
        self.text = ""

    def getText(self, pageNr):
        return self.text.replace("${PAGE}", pageNr)

    def generatePML(self, page, pageNr, cfg):
        x = cfg.paperWidth - cfg.marginRight

        page.add(pml.TextOp(self.getText(pageNr), x, cfg.pageNumberY,
                            cfg.fontSize, util.ALIGN_RIGHT))
