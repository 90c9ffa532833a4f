# setup.py
from setuptools import setup

import sys
import os.path

sys.path.append(os.path.join(os.path.split(__file__)[0], "scriptpdf"))
import misc

setup(
    name = "scriptpdf",
    version = misc.version,
    description = "Render plain-text screenplays as industry-standard paginated PDFs",

    long_description = """\
scriptpdf takes a screenplay as plain text, works out what each line is
(scene heading, action, character, parenthetical, dialogue, transition)
and lays it out in standard screenplay format:

 * US Letter pages, Courier 12pt, 1.5" left margin, 1" other margins.
 * Per-element indentation, line widths and spacing, all configurable.
 * Word wrapping and automatic page breaks, with page numbers starting
   on the second page of the script.
 * Title page with title and author.
 * PDF outline with one entry per scene heading.
 * Optional embedding of a custom TrueType font.
""",
      python_requires = ">=3.8",
      license = "GPL",
      packages = ["scriptpdf"],
      install_requires = [
          "reportlab>=3.6",
      ],
      extras_require = {
          "test": [
              "pytest>=7.0",
          ],
      },
      entry_points = {
          "console_scripts": [
              "scriptpdf=scriptpdf.main:main",
          ],
      },
)
