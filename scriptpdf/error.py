# exception classes


class ScriptPdfError(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


class ConfigError(ScriptPdfError):
    def __init__(self, msg):
        ScriptPdfError.__init__(self, msg)


# the PDF font could not be set up. renders are aborted as a whole on
# this, there is no fallback to a different font.
class FontError(ScriptPdfError):
    def __init__(self, msg):
        ScriptPdfError.__init__(self, msg)


class MiscError(ScriptPdfError):
    def __init__(self, msg):
        ScriptPdfError.__init__(self, msg)
