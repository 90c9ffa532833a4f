version = "1.0.0"

# name used for PDF creator/producer metadata and the command line tool
progName = "scriptpdf"

# title used when the caller does not give one
defaultTitle = "GeneratedScript"
