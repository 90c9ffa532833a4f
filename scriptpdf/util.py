# -*- coding: utf-8 -*-

import re

from reportlab.pdfbase import pdfmetrics

# alignment values
ALIGN_LEFT   = 0
ALIGN_CENTER = 1
ALIGN_RIGHT  = 2

# how many mm one inch is
INCH = 25.4

def upper(s):
    return s.upper()

# returns s with all possible different types of newlines converted to
# unix newlines, i.e. a single "\n"
def fixNL(s):
    return s.replace("\r\n", "\n").replace("\r", "\n")

# clamps the given value to a specific range. both limits are optional.
def clamp(val, minVal = None, maxVal = None):
    ret = val

    if minVal != None:
        ret = max(ret, minVal)

    if maxVal != None:
        ret = min(ret, maxVal)

    return ret

# convert given string to float, clamping it to the given range
# (optional). never throws any exceptions, return defVal (possibly clamped
# as well) on any errors.
def str2float(s, defVal, minVal = None, maxVal = None):
    val = defVal

    try:
        val = float(s)
    except (ValueError, OverflowError):
        pass

    return clamp(val, minVal, maxVal)

# like str2float, but for ints.
def str2int(s, defVal, minVal = None, maxVal = None, radix = 10):
    val = defVal

    try:
        val = int(s, radix)
    except ValueError:
        pass

    return clamp(val, minVal, maxVal)

# return count of how many 'ch' characters 's' begins with.
def countInitial(s, ch):
    cnt = 0

    for i in range(len(s)):
        if s[i] != ch:
            break

        cnt += 1

    return cnt

# return True if s is all upper-case and contains at least one letter
# that has case.
def isUpper(s):
    return s.isupper() and (s == s.upper())

# return how many mm tall given font size is.
def getTextHeight(size):
    return (size / 72.0) * 25.4

# return how many mm wide given text is in the given (reportlab) font at
# given size.
def getTextWidth(text, fontName, size):
    return (pdfmetrics.stringWidth(text, fontName, size) / 72.0) * 25.4

# return title turned into something usable as a file name: everything
# not in [A-Za-z0-9] is replaced by "_".
def title2filename(title, ext = ".pdf"):
    return re.sub(r"[^a-zA-Z0-9]", "_", title) + ext

# load 'filename' as text. undecodable bytes are replaced instead of
# rejected. errors (missing file etc) propagate as OSError.
def loadFile(filename):
    with open(filename, "r", encoding = "UTF-8", errors = "replace") as f:
        return f.read()

# write 'data' (bytes or str) to 'filename'. errors propagate as OSError.
def writeToFile(filename, data):
    if isinstance(data, str):
        data = data.encode("UTF-8")

    with open(filename, "wb") as f:
        f.write(data)
