# Rendering settings. Every setting is declared once, with its default,
# range and save name, through mypickle.Vars; Config.save() / load()
# read and write them as "Name:value" lines.

import scriptpdf.classifier as classifier
import scriptpdf.error as error
import scriptpdf.mypickle as mypickle
import scriptpdf.util as util

# mapping from line type to TypeInfo
_lt2ti = {}

# non-changing information about an element type
class TypeInfo:
    def __init__(self, lt, name):

        # line type, e.g. classifier.ACTION
        self.lt = lt

        # textual name, e.g. "Action"
        self.name = name

# script-specific information about an element type
class Type:
    cvars = None

    def __init__(self, lt):

        # line type
        self.lt = lt

        # pointer to TypeInfo
        self.ti = lt2ti(lt)

        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            # how many empty lines to insert before the element
            v.addInt("beforeSpacing", 0, "BeforeSpacing", 0, 5)

            # distance from the left margin, in characters
            v.addInt("indent", 0, "Indent", 0, 80)

            # maximum line length, in characters
            v.addInt("width", 5, "Width", 5, 80)

            v.addBool("isCaps", False, "AllCaps")

        self.__class__.cvars.setDefaults(self)

    def save(self, prefix):
        prefix += "%s/" % self.ti.name

        return self.cvars.save(prefix, self)

    def load(self, vals, prefix):
        prefix += "%s/" % self.ti.name

        self.cvars.load(vals, prefix, self)

# information about the PDF font
class PDFFontInfo:
    cvars = None

    # list of characters not allowed in pdfNames
    invalidChars = None

    def __init__(self):
        if not self.__class__.cvars:
            v = self.__class__.cvars = mypickle.Vars()

            # name to use in generated PDF file (CourierPrime, MyFont,
            # etc.). if empty, use the default PDF Courier font.
            v.addStr("pdfName", "", "Name")

            # filename for the TrueType font to embed. required if pdfName
            # is not a font already known to the PDF library.
            v.addStr("filename", "", "File")

            tmp = ""

            for i in range(256):
                # the OpenType font specification 1.4, of all places,
                # contains the most detailed discussion of characters
                # allowed in Postscript font names, in the section on
                # 'name' tables, describing name ID 6 (=Postscript name).
                if (i <= 32) or (i >= 127) or chr(i) in (
                    "[", "]", "(", ")", "{", "}", "<", ">", "/", "%"):
                    tmp += chr(i)

            self.__class__.invalidChars = tmp

        self.__class__.cvars.setDefaults(self)

    def save(self, prefix):
        return self.cvars.save(prefix, self)

    def load(self, vals, prefix):
        self.cvars.load(vals, prefix, self)

        # fix up invalid names
        self.pdfName = "".join(
            [c for c in self.pdfName if c not in self.invalidChars])

# per-render configuration
class Config:
    cvars = None

    def __init__(self):

        if not self.__class__.cvars:
            self.setupVars()

        self.__class__.cvars.setDefaults(self)

        # type configs, key = line type, value = Type
        self.types = { }

        # element types. indents are counted from the left margin, so with
        # the default 1.5" margin and 10 characters per inch these give the
        # standard 1.5" / 2.5" / 3.1" / 3.7" / 6.0" positions.
        t = Type(classifier.SCENE)
        t.beforeSpacing = 1
        t.indent = 0
        t.width = 60
        t.isCaps = True
        self.types[t.lt] = t

        t = Type(classifier.ACTION)
        t.indent = 0
        t.width = 60
        self.types[t.lt] = t

        t = Type(classifier.CHARACTER)
        t.beforeSpacing = 1
        t.indent = 22
        t.width = 30
        t.isCaps = True
        self.types[t.lt] = t

        t = Type(classifier.DIALOGUE)
        t.indent = 10
        t.width = 35
        self.types[t.lt] = t

        t = Type(classifier.PAREN)
        t.indent = 16
        t.width = 25
        self.types[t.lt] = t

        t = Type(classifier.TRANSITION)
        t.beforeSpacing = 1
        t.indent = 45
        t.width = 25
        t.isCaps = True
        self.types[t.lt] = t

        self.pdfFont = PDFFontInfo()

    def setupVars(self):
        v = self.__class__.cvars = mypickle.Vars()

        # font size used for PDF generation, in points
        v.addInt("fontSize", 12, "FontSize", 4, 72)

        # margins
        v.addFloat("marginBottom", 25.4, "Margin/Bottom", 0.0, 900.0)
        v.addFloat("marginLeft", 38.1, "Margin/Left", 0.0, 900.0)
        v.addFloat("marginRight", 25.4, "Margin/Right", 0.0, 900.0)
        v.addFloat("marginTop", 25.4, "Margin/Top", 0.0, 900.0)

        # paper size, US Letter
        v.addFloat("paperHeight", 279.4, "Paper/Height", 100.0, 1000.0)
        v.addFloat("paperWidth", 215.9, "Paper/Width", 50.0, 1000.0)

        # distance of page numbers from the top edge of the paper
        v.addFloat("pageNumberY", 12.7, "PageNumber/Y", 0.0, 900.0)

        # title page
        v.addInt("titleFontSize", 18, "Title/FontSize", 4, 72)
        v.addInt("authorFontSize", 14, "Title/AuthorFontSize", 4, 72)
        v.addStr("author", "Vadis AI Script Writer", "Title/Author")

        # classification heuristics
        v.addInt("characterMaxLength", 35, "Classifier/CharacterMaxLength",
                 1, 200)
        v.addInt("dialogueIndent", 2, "Classifier/DialogueIndent", 0, 40)

        # whether to add scene headings to the PDF outline
        v.addBool("pdfIncludeTOC", True, "PDF/IncludeTOC")

        # whether to show the PDF outline by default
        v.addBool("pdfShowTOC", True, "PDF/ShowTOC")

        # whether to draw rectangle showing margins
        v.addBool("pdfShowMargins", False, "PDF/ShowMargins")

    # load config from string 's'. unknown settings are ignored, numeric
    # values are clamped to their valid ranges.
    def load(self, s):
        vals = self.cvars.makeVals(s)

        self.cvars.load(vals, "", self)

        for t in self.types.values():
            t.load(vals, "Element/")

        self.pdfFont.load(vals, "PDF/Font/")

    # save config into a string and return that.
    def save(self):
        s = self.cvars.save("", self)

        for t in self.types.values():
            s += t.save("Element/")

        s += self.pdfFont.save("PDF/Font/")

        return s

    # get Type for given line type. UNKNOWN lines are laid out like
    # ACTION.
    def getType(self, lt):
        if lt == classifier.UNKNOWN:
            lt = classifier.ACTION

        t = self.types.get(lt)

        if not t:
            raise error.ConfigError("No layout for element type %s" %
                                    classifier.kindName(lt))

        return t

    # width of one character, in mm
    def getCharWidth(self):
        return util.getTextWidth(" ", "Courier", self.fontSize)

    # height of one line, in mm
    def getLineHeight(self):
        return util.getTextHeight(self.fontSize)

    # how many lines fit between the top and bottom margins. raises
    # ConfigError if not even one does.
    def getLinesPerPage(self):
        h = self.paperHeight - self.marginTop - self.marginBottom

        # the small fudge factor protects against 53.99999 lines.
        lines = int(h / self.getLineHeight() + 0.001)

        if lines < 1:
            raise error.ConfigError(
                "Page height %.1f mm minus margins leaves no room for text" %
                self.paperHeight)

        return lines

# load a Config from file 'filename'. raises ConfigError on failure.
def loadFile(filename):
    try:
        s = util.loadFile(filename)
    except OSError as e:
        raise error.ConfigError("Error loading config file '%s': %s" % (
            filename, e.strerror or e))

    cfg = Config()
    cfg.load(s)

    return cfg

def _init():

    for lt, name in (
        (classifier.SCENE, "SceneHeading"),
        (classifier.ACTION, "Action"),
        (classifier.CHARACTER, "Character"),
        (classifier.DIALOGUE, "Dialogue"),
        (classifier.PAREN, "Parenthetical"),
        (classifier.TRANSITION, "Transition")):

        ti = TypeInfo(lt, name)

        _lt2ti[lt] = ti

def lt2ti(lt):
    t = _lt2ti.get(lt)

    if t:
        return t
    else:
        raise error.ConfigError("Unknown linetype %d" % lt)

_init()
