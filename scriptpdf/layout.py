from typing import Dict, List, NamedTuple

import scriptpdf.classifier as classifier
import scriptpdf.error as error

# how to lay out one kind of element. immutable.
class LayoutRule(NamedTuple):
    # distance of the text from the left edge of the page, in mm
    xOffset: float

    # maximum line length, in characters
    maxWidthChars: int

    # empty lines to leave before the element
    preSpacingLines: int

    # whether the text is printed in upper case
    forceUppercase: bool

# element kinds that have a layout. UNKNOWN uses ACTION's.
LAID_OUT_KINDS = (classifier.SCENE, classifier.ACTION, classifier.CHARACTER,
                  classifier.PAREN, classifier.DIALOGUE,
                  classifier.TRANSITION)

# the layout rules of one render, built once from a config.
class LayoutTable:
    def __init__(self, cfg):
        chX = cfg.getCharWidth()

        self.rules: Dict[int, LayoutRule] = {}

        for lt in LAID_OUT_KINDS:
            t = cfg.getType(lt)

            self.rules[lt] = LayoutRule(
                xOffset = cfg.marginLeft + t.indent * chX,
                maxWidthChars = t.width,
                preSpacingLines = t.beforeSpacing,
                forceUppercase = t.isCaps)

        self.rules[classifier.UNKNOWN] = self.rules[classifier.ACTION]

    # EMPTY lines take up space but are never drawn, so asking for their
    # layout is a programming error.
    def layoutFor(self, lt: int) -> LayoutRule:
        rule = self.rules.get(lt)

        if rule is None:
            raise error.MiscError("No layout rule for element kind %s" %
                                  classifier.kindName(lt))

        return rule

# word wrap 'text' into lines at most maxWidthChars long, greedily, and
# return them as a list. words are separated by any whitespace and joined
# back with single spaces. a word longer than maxWidthChars gets a line of
# its own and is not split.
def wrap(text: str, maxWidthChars: int) -> List[str]:
    if maxWidthChars < 1:
        raise error.ConfigError("Invalid line width %d" % maxWidthChars)

    ret = []
    line = ""

    for word in text.split():
        if line and (len(line) + 1 + len(word)) > maxWidthChars:
            ret.append(line)
            line = word
        elif line:
            line += " " + word
        else:
            line = word

    if line:
        ret.append(line)

    return ret
