# -*- coding: utf-8 -*-

# Decides what kind of screenplay element a single line of plain text is.
#
# The input is whatever an upstream step extracted or generated, so this
# is a best-effort heuristic, not a parser: each line is looked at alone,
# plus the line directly after it, and the first matching rule wins:
#
#   1. blank line                                  -> EMPTY
#   2. INT./EXT. prefix, all caps                  -> SCENE
#   3. known transition, all caps, ends in ":"     -> TRANSITION
#   4. wrapped in "(" and ")"                      -> PAREN
#   5. short all caps line followed by a paren or
#      something other than a scene heading        -> CHARACTER
#   6. indented by at least two spaces             -> DIALOGUE
#   7. anything else                               -> ACTION

import re

import scriptpdf.util as util

# element kinds. exactly one is assigned to each input line. UNKNOWN is
# never returned by classify, it only exists so that callers can ask for
# its layout (which is the same as ACTION's).
SCENE = 1
ACTION = 2
CHARACTER = 3
DIALOGUE = 4
PAREN = 5
TRANSITION = 6
EMPTY = 7
UNKNOWN = 8

_kindNames = {
    SCENE : "SceneHeading",
    ACTION : "Action",
    CHARACTER : "Character",
    DIALOGUE : "Dialogue",
    PAREN : "Parenthetical",
    TRANSITION : "Transition",
    EMPTY : "Empty",
    UNKNOWN : "Unknown",
    }

TIMES_OF_DAY = ("DAY", "NIGHT", "MORNING", "EVENING", "AFTERNOON", "LATER",
                "CONTINUOUS", "SAME")

# "INT. LOCATION - TIME". the prefix must be followed by a space, a dot,
# or nothing, so that "INTO THE NIGHT" is not a scene heading.
SCENE_RE = re.compile(
    r"^(?P<prefix>INT\.?/EXT\.?|EXT\.?/INT\.?|I\.?/E\.?|INT\.?|EXT\.?)"
    r"(?=[ .]|$)"
    r"\.?\s*(?P<location>.*?)"
    r"(?:\s*-+\s*(?P<time>%s)\b.*)?$" % "|".join(TIMES_OF_DAY),
    re.IGNORECASE)

TRANSITION_RE = re.compile(
    r"^(?:FADE\s+(?:IN|OUT|TO\s+BLACK)|CUT\s+TO|DISSOLVE\s+TO"
    r"|MATCH\s+CUT\s+TO|CONTINUED):$")

# return textual name of given element kind, e.g. "SceneHeading".
def kindName(lt):
    return _kindNames.get(lt, "Unknown")

class Classifier:
    def __init__(self, characterMaxLength = 35, dialogueIndent = 2):
        # character names must be shorter than this
        self.characterMaxLength = characterMaxLength

        # lines starting with at least this many spaces are dialogue. 0
        # turns the rule off.
        self.dialogueIndent = dialogueIndent

    @classmethod
    def fromConfig(cls, cfg):
        return cls(cfg.characterMaxLength, cfg.dialogueIndent)

    # return element kind of 'line'. 'nextLine' is the line following it
    # in the input, or None if 'line' is the last one.
    def classify(self, line, nextLine = None):
        s = line.strip()

        if not s:
            return EMPTY

        if self.isScene(s):
            return SCENE

        if self.isTransition(s):
            return TRANSITION

        if self.isParen(s):
            return PAREN

        if self.isCharacter(s, nextLine):
            return CHARACTER

        if self.isDialogue(line, s):
            return DIALOGUE

        return ACTION

    # the predicates below all take the line with surrounding whitespace
    # removed, except for isDialogue, which needs the leading spaces.

    def isScene(self, s):
        return (s == util.upper(s)) and bool(SCENE_RE.match(s))

    def isTransition(self, s):
        return (s == util.upper(s)) and bool(TRANSITION_RE.match(s))

    def isParen(self, s):
        return s.startswith("(") and s.endswith(")")

    def isCharacter(self, s, nextLine):
        if not util.isUpper(s) or (len(s) >= self.characterMaxLength):
            return False

        if (" INT." in s) or (" EXT." in s) or s.endswith(":"):
            return False

        if nextLine is None:
            return True

        ns = nextLine.strip()

        if self.isParen(ns):
            return True

        return bool(ns) and not util.upper(ns).startswith(("INT", "EXT"))

    def isDialogue(self, line, s):
        if self.dialogueIndent <= 0:
            return False

        return (util.countInitial(line, " ") >= self.dialogueIndent) and \
            not s.startswith("(")

_default = Classifier()

# classify using the default settings.
def classify(line, nextLine = None):
    return _default.classify(line, nextLine)

